# =============================================================================
# Shared helper functions to create test teletext payloads
# =============================================================================


def make_run(
    fg: str = "white",
    bg: str = "black",
    length: int = 4,
    text: str = None,
    charcode: str = None,
) -> dict:
    """Create a run object as sent by the API (numbers are strings)."""
    run = {"fg": fg, "bg": bg, "length": str(length)}
    if text is not None:
        run["Text"] = text
    if charcode is not None:
        run["charcode"] = charcode
    return run


def make_line(*runs: dict) -> dict:
    """Create a line; a single run is sent as an object, not a list."""
    if len(runs) == 1:
        return {"run": runs[0]}
    return {"run": list(runs)}


def make_subpage(number: int = 1, lines: list = None, extra_content: list = None) -> dict:
    """Create a subpage with a plain-text block followed by a structured block."""
    if lines is None:
        lines = [make_line(make_run(text="TEST"))]

    content = [{"type": "text", "line": [{"number": "1", "Text": "ignored"}]}]
    content.extend(extra_content or [])
    content.append({"type": "structured", "line": lines})

    return {"number": str(number), "time": "2026-10-19T12:00:00+03:00", "content": content}


def make_payload(
    subpages: list = None,
    number: int = 100,
    prevpg: str = None,
    nextpg: str = None,
    name: str = None,
) -> dict:
    """Create a complete page response."""
    if subpages is None:
        subpages = [make_subpage()]

    page = {"number": str(number), "subpagecount": str(len(subpages)), "subpage": subpages}
    if prevpg is not None:
        page["prevpg"] = prevpg
    if nextpg is not None:
        page["nextpg"] = nextpg
    if name is not None:
        page["name"] = name

    return {"teletext": {"network": "YLE", "page": page}}
