from __future__ import annotations


class JSONValueError(Exception):
    def __init__(self, *args):
        super().__init__(*args)


class JSONParseError(JSONValueError, ValueError):
    """Malformed JSON text.

    Carries the offset of the failure in the source text together with
    the 1-based line and column derived from it.
    """

    def __init__(self, msg: str, doc: str, pos: int):
        lineno = doc.count("\n", 0, pos) + 1
        colno = pos - doc.rfind("\n", 0, pos)
        super().__init__(f"{msg}: line {lineno} column {colno} (char {pos})")
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.lineno = lineno
        self.colno = colno
