from fundme.db.driver import ContractDriver
from fundme.execution.runtime import rt
from fundme.exceptions import IndexOutOfRange
from fundme import config

driver = rt.env.get('__Driver') or ContractDriver()


class Datum:
    """A named piece of contract storage rooted at ``<contract>.<name>``."""
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)

    def _child(self, *parts):
        return config.DELIMITER.join([self._key] + [str(p) for p in parts])


class Variable(Datum):
    def __init__(self, contract, name, driver: ContractDriver=driver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._default_value = default_value

    def set(self, value):
        self._driver.set(self._key, value)

    def get(self):
        value = self._driver.get(self._key)
        return self._default_value if value is None else value


class Hash(Datum):
    """Mapping with a default for keys never written, like a Solidity mapping.

    Tuple keys address nested mappings: ``h['a', 'b']`` is stored at
    ``<contract>.<name>:a:b``.
    """
    def __init__(self, contract, name, driver: ContractDriver=driver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._default_value = default_value

    @staticmethod
    def _parts(key):
        parts = key if isinstance(key, tuple) else (key,)

        assert len(parts) <= config.MAX_KEY_DIMENSIONS, 'Hash keys have at most {} parts, got {}.'.format(
            config.MAX_KEY_DIMENSIONS, len(parts)
        )

        for part in parts:
            assert not isinstance(part, slice), 'Hash keys cannot be slices.'
            text = str(part)
            assert config.DELIMITER not in text and config.INDEX_SEPARATOR not in text, \
                'Hash key {} contains {} or {}.'.format(text, config.DELIMITER, config.INDEX_SEPARATOR)

        joined = config.DELIMITER.join(str(p) for p in parts)
        assert len(joined) <= config.MAX_KEY_LENGTH, 'Hash key is {} characters long, the limit is {}.'.format(
            len(joined), config.MAX_KEY_LENGTH
        )
        return parts

    def __setitem__(self, key, value):
        self._driver.set(self._child(*self._parts(key)), value)

    def __getitem__(self, key):
        value = self._driver.get(self._child(*self._parts(key)))
        return self._default_value if value is None else value


class Array(Datum):
    """Append-only list backed by one key per slot.

    The length lives at the bare key and slot ``i`` at ``<key>:<i>``, so reading one
    element never loads the rest of the list.
    """
    def __init__(self, contract, name, driver: ContractDriver=driver):
        super().__init__(contract, name, driver=driver)

    def _check_index(self, index):
        assert isinstance(index, int) and not isinstance(index, bool), 'Array indexes must be integers.'

        length = len(self)
        if index < 0 or index >= length:
            raise IndexOutOfRange(index=index, length=length)

    def __len__(self):
        return self._driver.get(self._key) or 0

    def append(self, value):
        length = len(self)
        self._driver.set(self._child(length), value)
        self._driver.set(self._key, length + 1)

    def __getitem__(self, index):
        self._check_index(index)
        return self._driver.get(self._child(index))

    def __setitem__(self, index, value):
        self._check_index(index)
        self._driver.set(self._child(index), value)

    def __iter__(self):
        for index in range(len(self)):
            yield self._driver.get(self._child(index))

    def clear(self):
        for index in range(len(self)):
            self._driver.delete(self._child(index))
        self._driver.set(self._key, 0)
