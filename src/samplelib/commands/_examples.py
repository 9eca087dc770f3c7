"""Usage examples shown by ``--examples``.

Keys are command paths below the program name (``""`` is the root group).
Each example is an ``(arguments, summary)`` pair; the arguments are a real
invocation, and the test suite replays every one of them.
"""

from __future__ import annotations

PROG_NAME = "samplelib"

Example = tuple[str, str]

EXAMPLES: dict[str, tuple[Example, ...]] = {
    "": (
        ("calc add 2 3", "arithmetic"),
        ('text process "  hi  " --trim --uppercase', "text transforms"),
        ("--json info", "library identity as JSON"),
        ("-q ready", "prints True when the configuration is usable"),
    ),
    "calc": (
        ("calc add 2 3", "5.0"),
        ("calc divide 10 4", "2.5"),
        ("--json calc multiply 1000000 1000000", "exact for large operands"),
        ("calc sign -5", "negative"),
    ),
    "calc add": (("calc add 2 3", "5.0"), ("calc add -1.5 1.5", "negative operands work")),
    "calc subtract": (("calc subtract 5 3", "2.0"),),
    "calc multiply": (("calc multiply 4 2.5", "10.0"),),
    "calc divide": (
        ("calc divide 10 4", "2.5"),
        ("-q calc divide 1 3", "bare quotient"),
    ),
    "calc abs": (("calc abs -7.5", "7.5"),),
    "calc sign": (("calc sign 0", "zero is neither positive nor negative"),),
    "text": (
        ('text process "  hi  " --trim --uppercase', "HI"),
        ('text reverse "Hello 世界"', "界世 olleH"),
        ('text palindrome "A man a plan a canal Panama"', "True"),
        ('text truncate "hello world" 8', "hello..."),
    ),
    "text process": (
        ('text process "  hi  " --trim --uppercase', "HI"),
        ('text process world --prefix "hello "', "hello world"),
        ('--json text process abc --suffix "!"', "abc! with UTF-16 length"),
    ),
    "text reverse": (('text reverse "Hello 世界"', "界世 olleH"),),
    "text palindrome": (('text palindrome "No lemon, no melon"', "True"),),
    "text words": (('text words "  two   words "', "2"),),
    "text truncate": (
        ('text truncate "hello world" 8', "hello..."),
        ('text truncate "hello world" 2', "suffix dropped: he"),
        ('text truncate "hello world" 6 --suffix ~', "hello~"),
    ),
    "info": (
        ("info", "name, version and description"),
        ("--json info", "as JSON"),
    ),
    "ready": (("ready", "exits 1 when the configuration is invalid"),),
}
