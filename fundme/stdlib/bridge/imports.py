import importlib
import inspect
import sys
from types import FunctionType, ModuleType
from fundme.config import PRIVATE_PREFIX, RESERVED_NAMES
from fundme.db.driver import ContractDriver
from fundme.execution.runtime import rt
from stdlib_list import stdlib_list, short_versions


def stdlib_modules():
    version = '{}.{}'.format(sys.version_info.major, sys.version_info.minor)
    if version not in short_versions:
        version = short_versions[-1]
    return set(stdlib_list(version))


def _driver():
    return rt.env.get('__Driver') or ContractDriver()


class Func:
    """Expected function of an interface: a name and, optionally, its argument names."""
    def __init__(self, name, args=(), private=False):
        self.name = PRIVATE_PREFIX + name if private else name
        self.args = tuple(args)

    def is_of(self, f: FunctionType):
        code = inspect.unwrap(f).__code__
        return code.co_name == self.name and code.co_varnames[:code.co_argcount] == self.args


def exists(name):
    return isinstance(name, str) and _driver().get_contract(name) is not None


def import_module(name):
    assert isinstance(name, str), 'Module name must be a string.'

    if name.startswith('_') or name in RESERVED_NAMES or name in stdlib_modules():
        raise ImportError('Contracts cannot import {}.'.format(name))

    if not exists(name):
        raise ImportError('No contract named {} is deployed.'.format(name))

    return importlib.import_module(name)


def enforce_interface(m: ModuleType, interface: list):
    members = vars(m)

    for expected in interface:
        found = members.get(expected.name)
        if not isinstance(found, FunctionType) or not expected.is_of(found):
            return False

    return True


imports_module = ModuleType('importlib')
imports_module.exists = exists
imports_module.import_module = import_module
imports_module.enforce_interface = enforce_interface
imports_module.Func = Func

exports = {
    'importlib': imports_module,
}
