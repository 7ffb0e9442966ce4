"""
Prints a sample document with a series of highlights, for a quick look in a terminal.

Run with `python -m json_highlight_writer.demo`.
"""

from json_highlight_writer import array, highlight, highlight_with_colors, object_


def sample_document():
    return object_([
        ("foo", False),
        ("bar", None),
        ("answer", 42),
        ("list", array(None, "world", True)),
        ("obj", object_(foo=False, bar=None, answer=42, list=array(None, "world", True))),
        ("2ndobj", object_(foo=False, bar=None, answer=42, list=array(None, "world", True))),
    ])


def main():
    data = sample_document()
    target_sets = [
        [data["obj"], data["2ndobj"]],
        [data["obj"], data["obj"]["list"]],
        [data["2ndobj"]],
        [data["list"]],
        [data["bar"]],
        [data["foo"]],
        [data["answer"]],
        [data["obj"]["list"]],
    ]

    for targets in target_sets:
        print(highlight_with_colors(data, targets, ["yellow", "cyan"]))

    print("-------------")

    for targets in target_sets:
        print(highlight(data, targets))


if __name__ == "__main__":
    main()
