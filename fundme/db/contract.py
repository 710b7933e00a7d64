from fundme.compilation.compiler import ContractingCompiler
from fundme.db.driver import ContractDriver
from fundme.execution.runtime import rt
from fundme.exceptions import ContractExists
from fundme.stdlib.bridge.imports import stdlib_modules
from fundme import config

_driver = rt.env.get('__Driver') or ContractDriver()


def check_name(name):
    assert isinstance(name, str) and name != '', 'Contract name must be a non-empty string.'
    assert not name.startswith('_'), 'Contract name cannot start with an underscore.'
    assert config.INDEX_SEPARATOR not in name and config.DELIMITER not in name, \
        'Contract name cannot contain {} or {}.'.format(config.INDEX_SEPARATOR, config.DELIMITER)
    assert name not in config.RESERVED_NAMES, 'Contract name {} is reserved.'.format(name)
    assert name not in stdlib_modules(), 'Contract name {} shadows a standard library module.'.format(name)


class Contract:
    def __init__(self, driver: ContractDriver=_driver):
        self._driver = driver

    def submit(self, name, code, author=None, constructor_args={}):
        """Compiles ``code``, runs its constructor as ``name`` and stores it.

        Anything the constructor raises propagates and nothing is stored.
        """
        from fundme.stdlib import env

        check_name(name)

        if self._driver.get_contract(name) is not None:
            raise ContractExists(contract_name=name)

        compiled = ContractingCompiler(module_name=name).parse_to_code(code, lint=True)

        scope = env.gather()
        scope['__contract__'] = True
        scope.update(rt.env)

        exec(compiled, scope)

        constructor = scope.get(config.CONSTRUCTOR_NAME)
        if constructor is not None:
            # Called by whoever called submission, not by submission itself
            entered = rt.context.enter(name, caller=rt.context.caller)
            try:
                constructor(**(constructor_args or {}))
            finally:
                if entered:
                    rt.context.leave()

        self._driver.set_contract(name=name, code=compiled, author=author)
