import ast

from .. import config

from ..logger import get_logger
from ..compilation.whitelists import ALLOWED_AST_TYPES, ALLOWED_ANNOTATION_TYPES, VIOLATIONS, UNSAFE_BUILTINS
from ..stdlib.bridge.imports import stdlib_modules


class Linter(ast.NodeVisitor):
    """Checks contract source against the contract language.

    ``check`` returns a list of ``Line <n>: <code> <message>`` strings, or None
    when the source is clean.
    """
    def __init__(self):
        self.log = get_logger('Linter')
        self.stdlib = stdlib_modules()
        self._reset()

    def _reset(self):
        self.violations = []
        self.storage_names = set()
        self.arguments = []
        self.annotations = []
        self.returns = []
        self.has_export = False
        self.has_constructor = False
        self._function_depth = 0

    def _flag(self, lnum, code, detail=None):
        message = 'Line {}: {} {}'.format(lnum, code, VIOLATIONS[code])
        if detail is not None:
            message += ' ({})'.format(detail)
        self.violations.append(message)

    def _check_type(self, node, lnum):
        if type(node) not in ALLOWED_AST_TYPES:
            self._flag(lnum, 'S1', type(node).__name__)

    def _check_name(self, name, lnum):
        if name.startswith('_'):
            self._flag(lnum, 'S2', name)

    @staticmethod
    def _annotation(node):
        if node is None:
            return None
        if isinstance(node, ast.Name):
            return node.id
        return type(node).__name__

    @staticmethod
    def _is_storage(value):
        return isinstance(value, ast.Call) and isinstance(value.func, ast.Name) and \
            value.func.id in config.STORAGE_TYPES

    def generic_visit(self, node):
        self._check_type(node, getattr(node, 'lineno', 0))
        super().generic_visit(node)

    def visit_Name(self, node):
        self._check_name(node.id, node.lineno)
        self.generic_visit(node)

    def visit_Attribute(self, node):
        self._check_name(node.attr, node.lineno)
        self.generic_visit(node)

    def visit_Import(self, node):
        if self._function_depth > 0:
            self._flag(node.lineno, 'S3')

        for alias in node.names:
            if alias.name in self.stdlib:
                self._flag(node.lineno, 'S13', alias.name)

        self.generic_visit(node)

    def visit_ImportFrom(self, node):
        self._flag(node.lineno, 'S4')

    def visit_ClassDef(self, node):
        self._flag(node.lineno, 'S5')

    def visit_AsyncFunctionDef(self, node):
        self._flag(node.lineno, 'S6')

    def visit_Assign(self, node):
        if self._is_storage(node.value):
            if any(k.arg in ('contract', 'name') for k in node.value.keywords):
                self._flag(node.lineno, 'S10')

            if len(node.targets) == 1 and isinstance(node.targets[0], ast.Name):
                self.storage_names.add(node.targets[0].id)
            else:
                self._flag(node.lineno, 'S11')

        self.generic_visit(node)

    def visit_Call(self, node):
        if isinstance(node.func, ast.Name) and node.func.id in UNSAFE_BUILTINS:
            self._flag(node.lineno, 'S13', node.func.id)

        self.generic_visit(node)

    def visit_FunctionDef(self, node):
        if len(node.decorator_list) > 1:
            self._flag(node.lineno, 'S9', '{} given'.format(len(node.decorator_list)))

        exported = False
        for d in node.decorator_list:
            name = d.id if isinstance(d, ast.Name) else None

            if name not in config.DECORATORS:
                self._flag(node.lineno, 'S7', 'use one of {}'.format(', '.join(sorted(config.DECORATORS))))
            elif name == config.EXPORT_DECORATOR:
                exported = self.has_export = True
            elif self.has_constructor:
                self._flag(node.lineno, 'S8')
            else:
                self.has_constructor = True

        for a in node.args.args:
            self._check_name(a.arg, node.lineno)
            self.arguments.append((a.arg, node.lineno))
            if exported:
                self.annotations.append((self._annotation(a.annotation), node.lineno))

        if exported and node.returns is not None:
            self.returns.append((self._annotation(node.returns), node.lineno))

        # Decorators and annotations were checked above; only the body and defaults are walked
        self._check_type(node, node.lineno)

        self._function_depth += 1
        for child in node.body + node.args.defaults:
            self.visit(child)
        self._function_depth -= 1

    def _final_checks(self):
        for name, lnum in self.arguments:
            if name in self.storage_names:
                self._flag(lnum, 'S14', name)

        if not self.has_export:
            self._flag(0, 'S12')

        for t, lnum in self.annotations:
            if t is None:
                self._flag(lnum, 'S16')
            elif t not in ALLOWED_ANNOTATION_TYPES:
                self._flag(lnum, 'S15', t)

        for t, lnum in self.returns:
            self._flag(lnum, 'S17', t)

    def check(self, tree):
        self._reset()
        self.visit(tree)
        self._final_checks()

        if not self.violations:
            return None

        self.log.debug('Contract failed lint with {} violations'.format(len(self.violations)))
        return self.violations
