from typing import Any, Dict, List, Optional, Tuple

from teletext_utils.models import (
    ContentBlock,
    Line,
    Page,
    Run,
    Subpage,
    STRUCTURED_CONTENT_TYPE,
)


def _as_list(value: Any) -> List[Any]:
    """
    Normalize a field that may be absent, a single object or a list of
    objects into a list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _parse_int(value: Any) -> Optional[int]:
    """
    Parse a numeric field sent as a string of digits ("102").
    Returns None when the field is absent or not a number.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _parse_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


# ------------------------------------------------------------------ #
# Run / line parsing
# ------------------------------------------------------------------ #
def parse_run(run: Dict[str, Any]) -> Run:
    """
    Parse one run object:
        { "bg": "blue", "fg": "white", "Text": "...", "charcode": "41h",
          "length": "4" }
    """
    if not isinstance(run, dict):
        return Run(length=0, foreground="", background="")

    length = _parse_int(run.get("length"))

    return Run(
        length=max(length or 0, 0),
        foreground=str(run.get("fg", "")),
        background=str(run.get("bg", "")),
        text=_parse_str(run.get("Text")),
        charcode=_parse_str(run.get("charcode")),
    )


def parse_line(line: Dict[str, Any]) -> Line:
    """
    Parse one line object. The "run" field is a single object when the line
    has one run and a list otherwise.
    """
    if not isinstance(line, dict):
        return Line()
    return Line(runs=tuple(parse_run(r) for r in _as_list(line.get("run"))))


def parse_content_block(block: Dict[str, Any]) -> ContentBlock:
    """
    Parse one content representation. Only "structured" blocks have their
    lines decoded, other variants are kept as empty tagged blocks.
    """
    if not isinstance(block, dict):
        return ContentBlock(type="")

    block_type = str(block.get("type", ""))
    if block_type != STRUCTURED_CONTENT_TYPE:
        return ContentBlock(type=block_type)

    lines = tuple(parse_line(line) for line in _as_list(block.get("line")))
    return ContentBlock(type=block_type, lines=lines)


def parse_subpage(subpage: Dict[str, Any]) -> Subpage:
    if not isinstance(subpage, dict):
        return Subpage(number=0)

    content: Tuple[ContentBlock, ...] = tuple(
        parse_content_block(block) for block in _as_list(subpage.get("content"))
    )
    return Subpage(number=_parse_int(subpage.get("number")) or 0, content=content)


# ------------------------------------------------------------------ #
# Page parsing
# ------------------------------------------------------------------ #
def parse_page(payload: Any, page_number: Optional[int] = None) -> Optional[Page]:
    """
    Build a typed Page from the parsed JSON response.

    Expected shape:
        { "teletext": { "page": {
            "number": "100", "name": "...", "time": "...",
            "subpage": [ { "number": "1", "content": [...] }, ... ],
            "prevpg": "100", "nextpg": "102" } } }

    Args:
        payload: Parsed JSON tree, or None when fetching failed
        page_number: Requested page number, used when the record has none

    Returns None for a failed fetch. Missing fields degrade to empty
    sequences. Raises TypeError only when the payload is not a JSON object.
    """
    if payload is None:
        return None

    if not isinstance(payload, dict):
        raise TypeError(
            f"Teletext payload must be a JSON object, got {type(payload).__name__}"
        )

    teletext = payload.get("teletext")
    record = teletext.get("page") if isinstance(teletext, dict) else None
    if not isinstance(record, dict):
        record = {}

    number = _parse_int(record.get("number"))
    if number is None:
        number = page_number if page_number is not None else 0

    subpages = tuple(parse_subpage(s) for s in _as_list(record.get("subpage")))

    return Page(
        number=number,
        subpages=subpages,
        previous_page=_parse_int(record.get("prevpg")),
        next_page=_parse_int(record.get("nextpg")),
        name=_parse_str(record.get("name")),
        time=_parse_str(record.get("time")),
    )
