import builtins
import importlib.util
import marshal
import sys
from importlib import invalidate_caches
from importlib.abc import Loader
from importlib.machinery import ModuleSpec
from fundme.db.driver import ContractDriver
from fundme.stdlib import env
from fundme.execution.runtime import rt

# Code executed with {'__contract__': True} in its globals may only import other
# deployed contracts while restricted imports are enabled. Contract names must not
# collide with installed packages.

_builtin_import = builtins.__import__

# Compiled blob -> code object
MODULE_CACHE = {}


def restricted_import(name, globals=None, locals=None, fromlist=(), level=0):
    if globals is not None and globals.get('__contract__') is True:
        spec = importlib.util.find_spec(name)
        if spec is None or not isinstance(spec.loader, DatabaseLoader):
            raise ImportError('Contracts cannot import {}.'.format(name))

    return _builtin_import(name, globals, locals, fromlist, level)


def enable_restricted_imports():
    builtins.__import__ = restricted_import


def disable_restricted_imports():
    builtins.__import__ = _builtin_import


def install_database_loader(driver=None):
    DatabaseFinder.driver = driver or ContractDriver()
    if DatabaseFinder not in sys.meta_path:
        sys.meta_path.insert(0, DatabaseFinder)


def uninstall_database_loader():
    if DatabaseFinder in sys.meta_path:
        sys.meta_path.remove(DatabaseFinder)
    invalidate_caches()


def clear_module_cache():
    MODULE_CACHE.clear()


class DatabaseFinder:
    """Meta path finder for contracts stored in the driver."""
    driver = ContractDriver()

    @classmethod
    def find_spec(cls, fullname, path=None, target=None):
        # Contracts are never packages
        if path is not None or '.' in fullname:
            return None

        if cls.driver.get_contract(fullname) is None:
            return None

        return ModuleSpec(fullname, DatabaseLoader(cls.driver))

    @classmethod
    def invalidate_caches(cls):
        pass


class DatabaseLoader(Loader):
    def __init__(self, driver=None):
        self.driver = driver or ContractDriver()

    def _code(self, name):
        blob = self.driver.get_compiled(name)
        if blob is None:
            raise ImportError('No contract named {} is deployed.'.format(name))

        if not isinstance(blob, bytes):
            blob = bytes.fromhex(blob)

        if blob not in MODULE_CACHE:
            MODULE_CACHE[blob] = marshal.loads(blob)
        return MODULE_CACHE[blob]

    def create_module(self, spec):
        return None

    def exec_module(self, module):
        scope = env.gather()
        scope.update(rt.env)
        scope['__contract__'] = True

        exec(self._code(module.__name__), scope)

        del scope['__builtins__']
        vars(module).update(scope)

        rt.loaded_modules.append(module.__name__)

    def module_repr(self, module):
        return '<contract {!r}>'.format(module.__name__)
