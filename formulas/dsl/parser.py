"""
Shunting-yard parser for the formula DSL.

Two explicit stacks are kept: operands (AST nodes) and operators
(descriptors, including the ``(`` and ``,`` sentinels). Function-call
arguments are parsed by recursing on the same stacks; each invocation only
reduces what it pushed itself, bounded by the operator-stack depth
(watermark) and the operand-stack depth (floor) recorded on entry.
"""
import logging

from .ast_nodes import NumberNode, VarNode, UnaryOpNode, BinaryOpNode, FunctionCallNode
from .exceptions import ExpressionTooDeepError, MismatchedParensError, UnexpectedTokenError
from .operators import DESCRIPTORS, Associativity, OperatorKind, lookup
from .tokenizer import Tokenizer
from .tokens import TokenType

logger = logging.getLogger(__name__)

# Previous token kinds after which an operator is a prefix (unary) one.
_UNARY_CONTEXT = (None, TokenType.OPERATOR, TokenType.LPAREN)


class Parser:
    def __init__(self, tokenizer):
        self.tokenizer = tokenizer
        self.operands = []
        self.operators = []

    @property
    def current(self):
        return self.tokenizer.current

    def advance(self):
        self.tokenizer.read_token()

    def parse(self):
        """Parse the whole input from its start; may be called repeatedly."""
        self.operands = []
        self.operators = []
        self.tokenizer.reset()
        self.advance()

        try:
            node = self._parse_until(TokenType.EOF)
        except RecursionError:
            raise ExpressionTooDeepError() from None

        logger.debug(f"Parsed expression {self.tokenizer.text!r} into {type(node).__name__}")
        return node

    def _parse_until(self, terminator):
        """Parse until ``terminator`` and return the produced subtree.

        Returns None when a call argument list is empty, e.g. ``f()``.
        """
        watermark = len(self.operators)
        floor = len(self.operands)
        open_parens = 0

        while True:
            token = self.current

            if token.type == TokenType.EOF:
                if terminator != TokenType.EOF:
                    raise MismatchedParensError("Mismatched parens: missing ')' after arguments")
                break

            if token.type == TokenType.RPAREN and open_parens == 0:
                if terminator == TokenType.RPAREN:
                    break
                raise MismatchedParensError("Mismatched parens: unexpected ')'")

            if token.type == TokenType.LPAREN:
                self.operators.append(DESCRIPTORS[OperatorKind.LEFT_PAREN])
                open_parens += 1
                self.advance()
            elif token.type == TokenType.RPAREN:
                self._close_group(watermark, floor)
                open_parens -= 1
                self.advance()
            elif token.type == TokenType.OPERATOR:
                self._push_operator(token, watermark, floor)
                self.advance()
            elif token.type == TokenType.NUMBER:
                self.operands.append(NumberNode(float(token.value)))
                self.advance()
            elif token.type == TokenType.IDENTIFIER:
                self._identifier(token)
            else:
                raise UnexpectedTokenError(token)

        self._drain(watermark, floor)

        produced = len(self.operands) - floor
        if produced == 0:
            if terminator == TokenType.RPAREN:
                return None
            raise UnexpectedTokenError(self.current, "Empty expression")
        if produced != 1:
            raise UnexpectedTokenError(
                self.current, f"Expected a single expression, found {produced} operand(s)"
            )
        return self.operands.pop()

    def _push_operator(self, token, watermark, floor):
        unary = self.tokenizer.prev_type in _UNARY_CONTEXT
        try:
            desc = lookup(token.value, unary)
        except KeyError:
            raise UnexpectedTokenError(token) from None

        while len(self.operators) > watermark:
            top = self.operators[-1]
            if top.is_sentinel:
                break
            # A comma closes the argument before it, whatever is pending.
            if (
                desc.kind == OperatorKind.COMMA
                or top.precedence > desc.precedence
                or (top.precedence == desc.precedence and desc.associativity == Associativity.LEFT)
            ):
                self._reduce(floor)
            else:
                break

        self.operators.append(desc)

    def _close_group(self, watermark, floor):
        while len(self.operators) > watermark:
            top = self.operators[-1]
            if top.kind == OperatorKind.LEFT_PAREN:
                self.operators.pop()
                return
            self._reduce(floor)
        raise MismatchedParensError("Mismatched parens: unexpected ')'")

    def _drain(self, watermark, floor):
        while len(self.operators) > watermark:
            if self.operators[-1].kind == OperatorKind.LEFT_PAREN:
                raise MismatchedParensError("Mismatched parens: missing ')'")
            self._reduce(floor)

    def _reduce(self, floor):
        desc = self.operators.pop()
        arity = 1 if desc.unary else 2
        if len(self.operands) - floor < arity:
            raise UnexpectedTokenError(
                self.current, f"Missing operand for '{desc.symbol}'"
            )

        if desc.unary:
            operand = self.operands.pop()
            self.operands.append(UnaryOpNode(desc.kind, operand))
        else:
            right = self.operands.pop()
            left = self.operands.pop()
            self.operands.append(BinaryOpNode(left, desc.kind, right))

    def _identifier(self, token):
        name = token.value
        self.advance()

        # Variable?
        if self.current.type != TokenType.LPAREN:
            self.operands.append(VarNode(name))
            return

        self.advance()  # skip (
        tree = self._parse_until(TokenType.RPAREN)
        self.advance()  # skip )

        args = []
        if tree is not None:
            _collect_arguments(tree, args)
        self.operands.append(FunctionCallNode(name, tuple(args)))


def _collect_arguments(node, args):
    """Unwrap nested comma nodes into an ordered argument list."""
    if isinstance(node, BinaryOpNode) and node.op == OperatorKind.COMMA:
        _collect_arguments(node.left, args)
        _collect_arguments(node.right, args)
    else:
        args.append(node)


def parse(text):
    return Parser(Tokenizer(text)).parse()
