"""
Segment builder for highlighted JSON output.

The `HighlightGenerator` runs the canonical encoder over a document and splits the
text it produces into plain and highlighted segments. A node is highlighted when it
is one of the caller's target nodes, compared by identity. When a highlighted node
contains another target, the inner match gets its own color and the outer color
resumes once the inner node has been written.
"""

from typing import Iterable, List, Optional

from termcolor import cprint

from json_highlight_writer.codegen import Generator
from json_highlight_writer.colors import ColorPolicy
from json_highlight_writer.format import Segment, render
from json_highlight_writer.nodes import JsonValue


class TargetMatcher:
    """
    Answers whether a node is one of the target nodes.

    Matching uses object identity, never equality: two equal `Null` nodes at different
    places in the tree are different targets. Target lists are expected to be short,
    so lookup is a plain scan.
    """

    def __init__(self, targets: Iterable[JsonValue]):
        self.targets: List[JsonValue] = list(targets)

    def count(self, node: JsonValue) -> int:
        """Number of times `node` appears in the target list."""
        return sum(1 for target in self.targets if target is node)

    def is_target(self, node: JsonValue) -> bool:
        return any(target is node for target in self.targets)


class HighlightGenerator(Generator):
    """
    Encoder sink that records the output as a list of segments.

    Exactly one segment is open at any time. Entering a target node closes it and
    opens a highlighted one; leaving the node closes that and reopens either the
    enclosing target's color or plain text. Joining the text of all segments always
    gives the canonical encoding of the document.

    Attributes:
        matcher (TargetMatcher): Decides which nodes are highlighted
        colors (ColorPolicy): Supplies one color per match
        finished (List[Segment]): Closed segments, in output order
        active (List[str]): Colors of the target nodes currently being written,
            innermost last
    """

    def __init__(
        self,
        targets: Iterable[JsonValue],
        colors: Optional[ColorPolicy] = None,
        *,
        debug: bool = False,
    ):
        """
        Args:
            targets: Nodes of the document to highlight; nodes that are not part of
                the document are never matched
            colors: The color policy for this encode; defaults to a single red
            debug: Print every segment transition
        """
        self.matcher = TargetMatcher(targets)
        self.colors = colors if colors is not None else ColorPolicy.fixed()
        self.debug_on = debug

        self.finished: List[Segment] = []
        self.active: List[str] = []
        self.current_color: Optional[str] = None
        self.current: List[str] = []

    def debug(self, caller: str, value: str):
        """Print debug information if debug mode is enabled."""
        if self.debug_on:
            cprint(caller, "green", end=" ")
            cprint(value, "blue")

    def open(self, color: Optional[str]):
        self.current_color = color
        self.current = []

    def close(self):
        text = "".join(self.current)
        # Empty runs carry nothing visible, leave them out
        if text:
            self.finished.append(Segment(text, self.current_color))
            self.debug("[close]", f"{self.current_color or 'plain'} {text!r}")
        self.current = []

    def write(self, text: str):
        self.current.append(text)

    def enter(self, node: JsonValue) -> int:
        """Start highlighting `node` if it is a target; return how many matches it took."""
        matches = self.matcher.count(node)
        for _ in range(matches):
            self.close()
            color = self.colors.next_color()
            self.debug("[enter]", f"match {self.colors.matches} -> {color}")
            self.active.append(color)
            self.open(color)
        return matches

    def leave(self, matches: int):
        """Stop highlighting after a node that took `matches` matches on entry."""
        for _ in range(matches):
            self.close()
            self.active.pop()
            # Resume the enclosing target's color, or plain text at the top level
            self.open(self.active[-1] if self.active else None)
            self.debug("[leave]", self.current_color or "plain")

    def segments(self) -> List[Segment]:
        """Close the open segment and return every segment in output order."""
        self.close()
        self.open(None)
        return list(self.finished)

    def consume(self, remainder_color: Optional[str] = None, *, force_color: Optional[bool] = None) -> str:
        """Render the collected segments into a displayable string."""
        return render(self.segments(), remainder_color, force_color=force_color)
