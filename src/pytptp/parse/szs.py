"""SZS status and dataform lines in the leading comments of TSTP output.

Provers announce the result of a run in comment lines such as::

    % SZS status Theorem for SYN075+1
    % SZS output start CNFRefutation for SYN075+1

Only the status and dataform codes are extracted, anything after them is
ignored.
"""

import logging
from typing import Optional

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from pytptp.core.annotations import SZS, Dataform, NoSuccess, Success

logger = logging.getLogger(__name__)


szs_lexer = Lark(r"""
    %import common.WS_INLINE
    %ignore WS_INLINE

    start : "SZS" (status | dataform) _REST?
    status : "status" CODE
    dataform : "output" "start" CODE

    CODE : /[A-Za-z]+/
    _REST : /.+/
""", start="start", parser="lalr")


class SZSAnnotation(Transformer):
    """Turns a parsed SZS line into an :class:`SZS` summary, or None if the
    code is not part of the SZS ontology."""

    def start(self, children):
        return children[0]

    def status(self, children):
        code = str(children[0])
        status = NoSuccess.from_ontology(code)
        if status is None:
            status = Success.from_ontology(code)
        if status is None:
            return None
        return SZS(status=status)

    def dataform(self, children):
        dataform = Dataform.from_ontology(str(children[0]))
        if dataform is None:
            return None
        return SZS(dataform=dataform)


def read_szs_comment(comment: str) -> Optional[SZS]:
    """Read the text of a ``%`` comment line (without the leading ``%``).

    A second ``%`` at the start of the text is allowed. Returns None for
    comments that are not SZS lines.
    """
    body = comment.lstrip()
    if body.startswith("%"):
        body = body[1:]
    try:
        tree = szs_lexer.parse(body)
    except UnexpectedInput:
        return None
    szs = SZSAnnotation().transform(tree)
    if szs is not None:
        logger.debug("Recognized SZS comment: %s", body.strip())
    return szs
