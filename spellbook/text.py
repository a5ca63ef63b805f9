import html
from typing import Iterable, List, Tuple

PARAGRAPH_BREAK = "\n\n"
CONCENTRATION_MARKER = "concentration"

def mentions_concentration(texts: Iterable[str]) -> bool:
    # The compendium has no concentration field; the prose is all we get.
    return any(CONCENTRATION_MARKER in t for t in texts)

def join_fragments(texts: Iterable[str]) -> str:
    """Empty <text/> fragments mark paragraph breaks; the rest is HTML-escaped."""
    parts: List[str] = []
    for t in texts:
        if t == "":
            parts.append(PARAGRAPH_BREAK)
        else:
            parts.append(html.escape(t))
    return "".join(parts)

def assemble_description(texts: List[str]) -> Tuple[str, bool]:
    return join_fragments(texts), mentions_concentration(texts)
