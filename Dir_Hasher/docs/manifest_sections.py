import json
from typing import Dict, List, Mapping, Tuple

from Dir_Hasher.digest.accumulators import CATEGORY_ORDER, CATEGORY_TITLES, get_algorithm

DIRECTORY_FIELDS = (
    "name",
    "total_files",
    "total_directories",
    "total_size_bytes",
    "inventory_date",
)

OTHER_TITLE = "Other digests"


def toml_string(value: str) -> str:
    """
    Quote a value as a TOML basic string.
    JSON escaping is valid TOML except for a raw DEL character.
    """
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


def toml_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return toml_string(str(value))


def _category(name: str) -> str:
    try:
        return get_algorithm(name).category
    except KeyError:
        return ""


def group_hashes(hashes: Mapping[str, str]) -> List[Tuple[str, List[Tuple[str, str]]]]:
    """
    [(title, [(name, value), ...]), ...] in category order; names the
    registry does not know are kept in a trailing group.
    """
    groups: Dict[str, List[Tuple[str, str]]] = {}
    for name, value in hashes.items():
        groups.setdefault(_category(name), []).append((name, value))

    ordered = [
        (CATEGORY_TITLES[category], groups[category])
        for category in CATEGORY_ORDER
        if category in groups
    ]
    if "" in groups:
        ordered.append((OTHER_TITLE, groups[""]))
    return ordered


def signed_block(directory: Mapping[str, object], hashes: Mapping[str, str]) -> str:
    """
    Render the [directory] and [hashes] sections.

    This exact text is what gets signed, and a verifier rebuilds it
    from the parsed manifest, so it must depend on the values only.
    """
    lines = ["[directory]"]
    for field_name in DIRECTORY_FIELDS:
        lines.append(f"{field_name} = {toml_value(directory[field_name])}")

    lines.append("")
    lines.append("[hashes]")

    for index, (title, entries) in enumerate(group_hashes(hashes)):
        if index:
            lines.append("")
        lines.append(f"# {title}")
        for name, value in entries:
            lines.append(f"{name} = {toml_string(value)}")

    return "\n".join(lines) + "\n"
