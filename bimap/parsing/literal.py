import ast
import logging

from lark import Lark
from lark.exceptions import UnexpectedInput
from lark.lexer import Token
from lark.tree import Tree

from bimap.bidict import BidirectionalMap

logger = logging.getLogger(__name__)

PARSER = 'lalr'

CONSTANTS = {
    'true': True, 'True': True,
    'false': False, 'False': False,
    'null': None, 'None': None,
}

grammar = r"""
?start: map

map: "{" (pair ("," pair)* ","?)? "}"
pair: value ":" value

?value: string
      | number
      | const
      | tuple

tuple: "(" (value ("," value)* ","?)? ")"

string: DOUBLE_QUOTED | SINGLE_QUOTED
number: SIGNED_NUMBER
const: CONST

DOUBLE_QUOTED: /"(?:[^"\\]|\\.)*"/
SINGLE_QUOTED: /'(?:[^'\\]|\\.)*'/
CONST: "true" | "True" | "false" | "False" | "null" | "None"

%import common.SIGNED_NUMBER
%import common.WS
%ignore WS
"""


class LiteralSyntaxError(ValueError):
    pass


class ParseLiteralVisitor:
    """Turns a textual map literal like `{'A': 1, 'B': 2}` into a BidirectionalMap.

    The literal is the same shape `str()` gives for a map of strings, numbers,
    booleans, None and tuples of those, so such a description parses back to
    an equal map.
    """

    def __init__(self) -> None:
        self.parser = Lark(grammar, start='start', parser=PARSER)

    def parse(self, text):
        try:
            tree = self.parser.parse(text)
        except UnexpectedInput as e:
            logger.debug('Rejecting map literal %r: %s', text, e)
            raise LiteralSyntaxError(str(e)) from e
        return self.visit(tree)

    def visit(self, node):
        if isinstance(node, Tree):
            visited_children = [self.visit(c) for c in node.children]
            custom_visit_method = 'visit_' + str(node.data)
            method = getattr(self, custom_visit_method, self.generic_visit)
            return method(node, visited_children)
        else:
            return node

    def generic_visit(self, node, visited_children):
        return visited_children[0]

    def visit_map(self, node, visited_children):
        return BidirectionalMap.from_unique_pairs(visited_children)

    def visit_pair(self, node, visited_children):
        assert len(visited_children) == 2
        return tuple(visited_children)

    def visit_tuple(self, node, visited_children):
        return tuple(visited_children)

    def visit_string(self, node, visited_children):
        assert len(visited_children) == 1
        token = visited_children[0]
        assert isinstance(token, Token)
        return ast.literal_eval(token.value)

    def visit_number(self, node, visited_children):
        token = visited_children[0]
        try:
            return int(token.value)
        except ValueError:
            return float(token.value)

    def visit_const(self, node, visited_children):
        token = visited_children[0]
        assert token.value in CONSTANTS
        return CONSTANTS[token.value]


parser = ParseLiteralVisitor()
