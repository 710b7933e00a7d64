import marshal

from fundme import config
from fundme.db.encoder import encode, decode, encode_kv
from fundme.execution.runtime import rt
from fundme.logger import get_logger


class InMemDriver:
    """Committed state. Values are kept JSON encoded, as a disk store would hold them."""
    def __init__(self):
        self.db = {}

    def get(self, key: str):
        return decode(self.db.get(key))

    def set(self, key: str, value):
        if value is None:
            self.delete(key)
        else:
            self.db[key] = encode(value)

    def delete(self, key: str):
        self.db.pop(key, None)

    def flush(self):
        self.db.clear()


class CacheDriver:
    """Buffers a transaction's writes over the committed store.

    Reads and writes are priced while the gas meter runs. A stored None
    marks a pending delete.
    """
    def __init__(self, driver=None):
        self.driver = driver or InMemDriver()
        self.pending_writes = {}

    def find(self, key: str):
        if key in self.pending_writes:
            return self.pending_writes[key]
        return self.driver.get(key)

    def get(self, key: str):
        value = self.find(key)
        if value is not None:
            rt.deduct_read(*encode_kv(key, value))
        return value

    def set(self, key: str, value):
        rt.deduct_write(*encode_kv(key, value))
        self.pending_writes[key] = value

    def delete(self, key: str):
        self.set(key, None)

    def commit(self):
        for key, value in self.pending_writes.items():
            self.driver.set(key, value)
        self.pending_writes = {}

    def checkpoint(self):
        return dict(self.pending_writes)

    def revert(self, checkpoint):
        self.pending_writes = dict(checkpoint)

    def rollback(self):
        self.pending_writes = {}


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.log = get_logger('Driver')

    @staticmethod
    def make_key(contract, variable, args=()):
        key = '{}{}{}'.format(contract, config.INDEX_SEPARATOR, variable)
        return config.DELIMITER.join([key] + [str(a) for a in args])

    def get_var(self, contract, variable, arguments=()):
        return self.get(self.make_key(contract, variable, arguments))

    def set_var(self, contract, variable, arguments=(), value=None):
        self.set(self.make_key(contract, variable, arguments), value)

    def get_contract(self, name):
        return self.get_var(name, config.CODE_KEY)

    def get_compiled(self, name):
        return self.get_var(name, config.COMPILED_KEY)

    def get_author(self, name):
        return self.get_var(name, config.AUTHOR_KEY)

    def set_contract(self, name, code, author=None):
        if self.get_contract(name) is not None:
            return

        # Functions keep the contract name as their filename; the executor checks it
        compiled = marshal.dumps(compile(code, name, 'exec'))

        self.set_var(name, config.CODE_KEY, value=code)
        self.set_var(name, config.COMPILED_KEY, value=compiled)
        self.set_var(name, config.AUTHOR_KEY, value=author)

        self.log.debug('Stored contract {}'.format(name))

    def get_balance(self, address):
        return self.get_var(config.CURRENCY_CONTRACT, config.BALANCES_HASH, [address]) or 0

    def set_balance(self, address, amount):
        self.set_var(config.CURRENCY_CONTRACT, config.BALANCES_HASH, [address], value=amount)

    def flush(self):
        self.driver.flush()
        self.rollback()
