import ast
import astor

from fundme import config
from fundme.compilation.linter import Linter
from fundme.exceptions import CompilationException


class ContractingCompiler(ast.NodeTransformer):
    """Rewrites contract source into what the runtime executes.

    Undecorated functions get the private prefix, the constructor becomes
    ``____`` and exports are wrapped so calling them switches the context to
    this contract. Storage declarations learn their contract and name.
    """
    def __init__(self, module_name='__main__', linter=None):
        self.module_name = module_name
        self.linter = linter or Linter()
        self.private_names = set()

    @staticmethod
    def privatize(name):
        return config.PRIVATE_PREFIX + name

    def parse(self, source: str, lint=True):
        tree = ast.parse(source)

        if lint:
            violations = self.linter.check(tree)
            if violations is not None:
                raise CompilationException(violations)

        self.private_names = {node.name for node in ast.walk(tree)
                              if isinstance(node, ast.FunctionDef) and not node.decorator_list}

        tree = self.visit(tree)
        return ast.fix_missing_locations(tree)

    def parse_to_code(self, source, lint=True):
        return astor.to_source(self.parse(source, lint=lint))

    def visit_FunctionDef(self, node):
        if not node.decorator_list:
            node.name = self.privatize(node.name)
        else:
            decorator = node.decorator_list.pop()

            if decorator.id == config.CONSTRUCTOR_DECORATOR:
                node.name = config.CONSTRUCTOR_NAME
            else:
                node.decorator_list.append(
                    ast.Call(func=ast.Name(id='__export', ctx=ast.Load()),
                             args=[ast.Constant(value=self.module_name)],
                             keywords=[])
                )

        self.generic_visit(node)
        return node

    def visit_Assign(self, node):
        if isinstance(node.value, ast.Call) and isinstance(node.value.func, ast.Name) and \
                node.value.func.id in config.STORAGE_TYPES:
            node.value.keywords.append(ast.keyword(arg='contract', value=ast.Constant(value=self.module_name)))
            node.value.keywords.append(ast.keyword(arg='name', value=ast.Constant(value=node.targets[0].id)))

        self.generic_visit(node)
        return node

    def visit_Name(self, node):
        if node.id in self.private_names:
            node.id = self.privatize(node.id)
        return node
