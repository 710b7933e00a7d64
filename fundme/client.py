import ast
import inspect
import os
import time
from functools import partial
from types import FunctionType

import astor
import autopep8

from fundme import config
from fundme.accounts import Accounts
from fundme.compilation.compiler import ContractingCompiler
from fundme.db.driver import ContractDriver
from fundme.execution.executor import Executor
from fundme.execution.module import clear_module_cache

SUBMISSION_FILENAME = os.path.join(os.path.dirname(__file__), 'contracts', 'submission.s.py')


def _raise_or_return(output, return_full_output):
    if output['status_code'] == 1:
        raise output['result']
    return output if return_full_output else output['result']


class AbstractContract:
    """Handle on a deployed contract.

    Every exported function becomes a method that sends a transaction from
    ``signer``. Besides the function's own arguments a call accepts ``signer``,
    ``value``, ``now``, ``gas_limit``, ``gas_price``, ``metering`` and
    ``return_full_output``.
    """
    def __init__(self, name, signer, environment, executor: Executor, funcs):
        self.name = name
        self.signer = signer
        self.environment = environment
        self.executor = executor
        self.functions = funcs

        for func in funcs:
            setattr(self, func, partial(self._call, func=func))

    @property
    def address(self):
        return self.name

    def connect(self, signer):
        return AbstractContract(name=self.name,
                                signer=signer,
                                environment=self.environment,
                                executor=self.executor,
                                funcs=self.functions)

    def run_private_function(self, f, signer=None, **kwargs):
        if not f.startswith(config.PRIVATE_PREFIX):
            f = config.PRIVATE_PREFIX + f

        self.executor.bypass_privates = True
        try:
            return self._call(func=f, signer=signer, **kwargs)
        finally:
            self.executor.bypass_privates = False

    def _call(self, func, signer=None, value=0, now=None, gas_limit=config.DEFAULT_GAS_LIMIT, gas_price=None,
              metering=None, return_full_output=False, **kwargs):
        environment = dict(self.environment)
        environment.setdefault('now', int(time.time()) if now is None else now)

        output = self.executor.execute(sender=signer or self.signer,
                                       contract_name=self.name,
                                       function_name=func,
                                       kwargs=kwargs,
                                       environment=environment,
                                       auto_commit=True,
                                       value=value,
                                       gas_limit=gas_limit,
                                       gas_price=gas_price,
                                       metering=metering)

        return _raise_or_return(output, return_full_output)


class ContractingClient:
    """Local chain: one driver, one executor, the funded accounts and the submission contract."""
    def __init__(self, signer=None,
                 submission_filename=SUBMISSION_FILENAME,
                 driver=None,
                 metering=True,
                 gas_price=config.DEFAULT_GAS_PRICE,
                 accounts=None,
                 environment=None):

        self.raw_driver = driver or ContractDriver()
        self.executor = Executor(driver=self.raw_driver, metering=metering, gas_price=gas_price)
        self.accounts = accounts or Accounts()
        self.signer = signer or self.accounts.deployer
        self.submission_filename = submission_filename
        self.environment = environment or {}

        self._seed_genesis()

    def _seed_genesis(self):
        with open(self.submission_filename) as f:
            self.raw_driver.set_contract(name=config.SUBMISSION_CONTRACT, code=f.read())

        self.accounts.seed(self.raw_driver)
        self.raw_driver.commit()

        self.submission_contract = self.get_contract(config.SUBMISSION_CONTRACT)

    def flush(self):
        self.raw_driver.flush()
        clear_module_cache()
        self._seed_genesis()

    def get_contract(self, name, signer=None):
        code = self.raw_driver.get_contract(name)
        if code is None:
            return None

        exported = [node.name for node in ast.walk(ast.parse(code))
                    if isinstance(node, ast.FunctionDef) and not node.name.startswith(config.PRIVATE_PREFIX)]

        return AbstractContract(name=name,
                                signer=signer or self.signer,
                                environment=self.environment,
                                executor=self.executor,
                                funcs=exported)

    @staticmethod
    def closure_to_code_string(f):
        # The closure's body is the contract; its name is the default contract name
        source = autopep8.fix_code(inspect.getsource(f))
        tree = ast.parse(source)

        assert len(tree.body) == 1 and isinstance(tree.body[0], ast.FunctionDef), \
            'Expected a single function wrapping the contract.'

        outer = tree.body[0]
        tree.body = outer.body

        return astor.to_source(tree), outer.name

    def submit(self, f, name=None, constructor_args={}, signer=None, metering=None):
        if isinstance(f, FunctionType):
            f, default_name = self.closure_to_code_string(f)
            name = name or default_name

        assert name is not None, 'A contract submitted as source needs a name.'

        self.submission_contract.submit_contract(name=name, code=f, constructor_args=constructor_args,
                                                 signer=signer or self.signer, metering=metering)

        return self.get_contract(name)

    def get_var(self, contract, variable, arguments=()):
        return self.raw_driver.get_var(contract, variable, arguments)

    def get_balance(self, address):
        return self.raw_driver.get_balance(address)

    def set_balance(self, address, amount):
        self.raw_driver.set_balance(address, amount)
        self.raw_driver.commit()

    def send(self, to, amount, signer=None, gas_price=None, metering=None, return_full_output=False):
        output = self.executor.send(sender=signer or self.signer,
                                    to=to,
                                    amount=amount,
                                    environment={**self.environment, 'now': int(time.time())},
                                    auto_commit=True,
                                    gas_price=gas_price,
                                    metering=metering)

        return _raise_or_return(output, return_full_output)
