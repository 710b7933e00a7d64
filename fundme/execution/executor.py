import importlib
import time
import traceback
from copy import deepcopy
from types import FunctionType
from fundme.execution.runtime import rt
from fundme.db.driver import ContractDriver
from fundme.execution.module import install_database_loader, enable_restricted_imports, disable_restricted_imports
from fundme.exceptions import Revert, ContractNotFound, InsufficientFunds
from fundme.logger import get_logger
from fundme import config


class Executor:
    def __init__(self, driver=None, metering=True, gas_price=config.DEFAULT_GAS_PRICE, bypass_privates=False):
        self.driver = driver or ContractDriver()
        self.metering = metering
        self.gas_price = gas_price
        self.bypass_privates = bypass_privates

        self.log = get_logger('Executor')

        rt.env.update({'__Driver': self.driver})

    @staticmethod
    def _output(status_code, result, gas_used, gas_price, writes):
        return {
            'status_code': status_code,
            'result': result,
            'gas_used': gas_used,
            'effective_gas_price': gas_price,
            'writes': writes,
        }

    def _pricing(self, metering, gas_price):
        metering = self.metering if metering is None else metering
        if not metering:
            return False, 0
        return True, self.gas_price if gas_price is None else gas_price

    def _rejected(self, sender, balance, required):
        error = InsufficientFunds(sender=sender, balance=balance, required=required)
        self.log.warning(str(error))
        return self._output(1, error, 0, 0, {})

    def _finish(self, driver, auto_commit):
        writes = deepcopy(driver.pending_writes)
        if auto_commit:
            driver.commit()
        return writes

    def _resolve(self, module, contract_name, function_name):
        # Exports keep the contract's own function on __wrapped__; anything else is not callable
        func = getattr(module, function_name, None)
        target = getattr(func, '__wrapped__', None)

        if target is None and self.bypass_privates:
            target = func

        if not isinstance(target, FunctionType) or target.__code__.co_filename != contract_name:
            raise Revert(reason='Function {} does not exist on {}'.format(function_name, contract_name))

        return func

    def execute(self, sender, contract_name, function_name, kwargs,
                environment={},
                auto_commit=False,
                driver=None,
                value=0,
                gas_limit=config.DEFAULT_GAS_LIMIT,
                gas_price=None,
                metering=None) -> dict:

        if not self.bypass_privates:
            assert not function_name.startswith(config.PRIVATE_PREFIX), 'Private method not callable.'

        assert isinstance(value, int) and value >= 0, 'Value must be a non-negative integer.'

        metering, gas_price = self._pricing(metering, gas_price)
        driver = driver or self.driver

        rt.env.update({'__Driver': driver})
        install_database_loader(driver=driver)

        # Value plus the most gas the call may burn must be covered up front
        balance = driver.get_balance(sender)
        required = value + gas_limit * gas_price
        if balance < required:
            return self._rejected(sender, balance, required)

        checkpoint = driver.checkpoint()
        status_code = 0

        try:
            if driver.get_contract(contract_name) is None:
                raise ContractNotFound(contract_name=contract_name)

            if value > 0:
                driver.set_balance(sender, balance - value)
                driver.set_balance(contract_name, driver.get_balance(contract_name) + value)

            rt.env.update(environment)
            rt.env.setdefault('now', int(time.time()))
            rt.set_up(gas_limit=gas_limit, meter=metering)
            rt.context.begin(this=contract_name, caller=sender, signer=sender, value=value)

            enable_restricted_imports()
            try:
                module = importlib.import_module(contract_name)
                result = self._resolve(module, contract_name, function_name)(**kwargs)
            finally:
                disable_restricted_imports()

        except Exception as e:
            if isinstance(e, AssertionError):
                e = Revert(reason=str(e))

            result = e
            status_code = 1

            # The value transfer is undone along with everything else
            driver.revert(checkpoint)

            if isinstance(e, Revert):
                self.log.revert('{}.{} reverted: {}'.format(contract_name, function_name, e))
            else:
                self.log.error(str(e))
                self.log.error(traceback.format_exc())

        rt.tracer.stop()
        gas_used = rt.tracer.get_gas_used() if metering else 0

        # Gas is charged on reverts too
        if metering:
            driver.set_balance(sender, driver.get_balance(sender) - gas_used * gas_price)

        writes = self._finish(driver, auto_commit)

        rt.clean_up()
        rt.env.update({'__Driver': driver})

        self.log.tx('{} -> {}.{} status={} gas={}'.format(sender, contract_name, function_name, status_code, gas_used))

        return self._output(status_code, result, gas_used, gas_price, writes)

    def send(self, sender, to, amount,
             environment={},
             auto_commit=False,
             driver=None,
             gas_limit=config.DEFAULT_GAS_LIMIT,
             gas_price=None,
             metering=None) -> dict:
        """Plain value transfer. Contracts receive it through their exported ``receive`` function."""
        driver = driver or self.driver

        if driver.get_contract(to) is not None:
            return self.execute(sender=sender, contract_name=to, function_name='receive', kwargs={},
                                environment=environment, auto_commit=auto_commit, driver=driver, value=amount,
                                gas_limit=gas_limit, gas_price=gas_price, metering=metering)

        assert isinstance(amount, int) and amount >= 0, 'Value must be a non-negative integer.'

        metering, gas_price = self._pricing(metering, gas_price)
        gas_used = config.BASE_TX_GAS if metering else 0

        balance = driver.get_balance(sender)
        required = amount + gas_used * gas_price
        if balance < required:
            return self._rejected(sender, balance, required)

        driver.set_balance(sender, balance - required)
        driver.set_balance(to, driver.get_balance(to) + amount)

        writes = self._finish(driver, auto_commit)

        self.log.tx('{} -> {} value={} gas={}'.format(sender, to, amount, gas_used))

        return self._output(0, None, gas_used, gas_price, writes)
