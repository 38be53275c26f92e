"""Option parameter splitting.

A parameter named ``options.foo`` documents a key of a configuration object
argument rather than a positional parameter. Dot binds tighter than comma,
so ``options.foo,bar`` is a single option labelled ``foo, bar``; pipes are
treated like commas so ``options.foo|bar`` gives the same label.
"""

from __future__ import annotations

import re

OPTIONS_PREFIX = "options"

_ALTERNATES_RE = re.compile(r"[,|]")


def normalize_param_name(name: str) -> str:
    return _ALTERNATES_RE.sub(", ", name)


def split_option_params(params: list[dict] | None) -> tuple[list[dict], list[dict]]:
    """Partition parameters into (plain, options), keeping relative order.

    Option names keep only the segment right after ``options.``, so
    ``options.foo.bar`` becomes ``foo``. Parameters are renamed in place.
    """
    plain: list[dict] = []
    options: list[dict] = []

    for param in params or []:
        name = param.get("name")
        if not isinstance(name, str):
            plain.append(param)
            continue

        param["name"] = normalize_param_name(name)
        split_name = param["name"].split(".")

        if len(split_name) < 2 or split_name[0] != OPTIONS_PREFIX:
            plain.append(param)
            continue

        param["name"] = split_name[1]
        options.append(param)

    return plain, options
