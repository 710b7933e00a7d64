import ast
import builtins

SAFE_BUILTINS = {'Exception', 'False', 'None', 'True', 'abs', 'all', 'any', 'bool', 'bytes', 'dict', 'divmod',
                 'enumerate', 'filter', 'format', 'hex', 'int', 'isinstance', 'len', 'list', 'map', 'max', 'min',
                 'pow', 'range', 'reversed', 'round', 'set', 'sorted', 'str', 'sum', 'tuple', 'zip'}

UNSAFE_BUILTINS = set(dir(builtins)) - SAFE_BUILTINS

STATEMENT_TYPES = {ast.Module, ast.FunctionDef, ast.Import, ast.Assign, ast.AugAssign, ast.Assert, ast.Return,
                   ast.Expr, ast.If, ast.For, ast.While, ast.Pass, ast.Raise}

EXPRESSION_TYPES = {ast.Call, ast.Attribute, ast.Subscript, ast.Slice, ast.Name, ast.Constant, ast.BinOp,
                    ast.UnaryOp, ast.BoolOp, ast.Compare, ast.IfExp, ast.Dict, ast.List, ast.Set, ast.Tuple,
                    ast.Starred, ast.ListComp, ast.comprehension, ast.keyword, ast.arguments, ast.arg, ast.alias}

OPERATOR_TYPES = {ast.Add, ast.Sub, ast.Mult, ast.Div, ast.FloorDiv, ast.Mod, ast.Pow, ast.USub, ast.Not, ast.And,
                  ast.Or, ast.Eq, ast.NotEq, ast.Lt, ast.LtE, ast.Gt, ast.GtE, ast.Is, ast.IsNot, ast.In, ast.NotIn}

ALLOWED_AST_TYPES = STATEMENT_TYPES | EXPRESSION_TYPES | OPERATOR_TYPES | {ast.Load, ast.Store}

ALLOWED_ANNOTATION_TYPES = {'dict', 'list', 'str', 'int', 'bool', 'Any'}

VIOLATIONS = {
    'S1': 'syntax not allowed in contracts',
    'S2': 'names may not start with an underscore',
    'S3': 'imports must be at module level',
    'S4': 'from-imports are not supported',
    'S5': 'classes are not allowed',
    'S6': 'async functions are not allowed',
    'S7': 'unknown decorator',
    'S8': 'more than one constructor',
    'S9': 'only one decorator per function',
    'S10': 'storage declarations may not set contract or name',
    'S11': 'storage declarations need a single plain name',
    'S12': 'contract exports nothing',
    'S13': 'standard library module or builtin not allowed',
    'S14': 'argument shadows a storage declaration',
    'S15': 'annotation type not allowed',
    'S16': 'exported argument is missing an annotation',
    'S17': 'return annotations are not allowed',
}
