from fundme.db.driver import ContractDriver
from fundme.execution.runtime import rt
from fundme.exceptions import Revert


def _driver():
    return rt.env.get('__Driver') or ContractDriver()


def balance_of(address: str):
    return _driver().get_balance(address)


def transfer(to: str, amount: int):
    # Moves native currency out of the contract that is currently executing
    assert isinstance(amount, int) and amount >= 0, 'Transfer amount must be a non-negative integer.'

    driver = _driver()
    sender = rt.context.this

    balance = driver.get_balance(sender)
    if balance < amount:
        raise Revert(reason='Transfer failed: {} holds {}, tried to send {}'.format(sender, balance, amount))

    driver.set_balance(sender, balance - amount)
    driver.set_balance(to, driver.get_balance(to) + amount)


exports = {
    'balance_of': balance_of,
    'transfer': transfer,
}
