class ContractingError(Exception):
    """
    Root of every error the engine raises. Subclasses set
    ``fmt``, which is filled from the keyword arguments.

    :ivar kwargs: The values the message was built from
    """
    fmt = 'Unknown engine error'

    def __init__(self, **kwargs):
        super().__init__(self.fmt.format(**kwargs))
        self.kwargs = kwargs


class ContractExists(ContractingError):
    fmt = "A contract named '{contract_name}' is already deployed"


class ContractNotFound(ContractingError):
    fmt = "No contract named '{contract_name}' is deployed"


class InsufficientFunds(ContractingError):
    """
    The sender cannot cover the value sent plus the
    most gas the transaction may burn.

    :ivar sender: Paying account
    :ivar balance: Its native balance
    :ivar required: value + gas_limit * gas_price
    """
    fmt = "Sender '{sender}' holds {balance} but the transaction may cost {required}"


class CompilationException(ContractingError):
    fmt = '{report}'

    def __init__(self, violations):
        super().__init__(report='\n'.join(violations))
        self.violations = violations


class Revert(ContractingError):
    """
    Raised from inside a contract. Every write the
    transaction made is thrown away.

    :ivar reason: Revert string, empty for custom errors
    """
    fmt = '{reason}'

    def __init__(self, reason='', **kwargs):
        super().__init__(reason=reason, **kwargs)
        self.reason = reason


class CustomError(Revert):
    error_name = 'CustomError'
    fmt = "reverted with custom error '{error_name}()'"

    def __init__(self, **kwargs):
        kwargs.setdefault('error_name', self.error_name)
        super().__init__(**kwargs)
        self.error_name = kwargs['error_name']


class OutOfGas(Revert):
    fmt = 'Transaction ran out of gas: {used} used, limit is {limit}'

    def __init__(self, used, limit):
        super().__init__(reason='out of gas', used=used, limit=limit)


class IndexOutOfRange(Revert):
    fmt = '{reason}: index {index}, length {length}'

    def __init__(self, index, length):
        super().__init__(reason='array index out of bounds', index=index, length=length)
        self.index = index
        self.length = length


class InsufficientContribution(Revert):
    def __init__(self, reason='You need to spend more ETH!', **kwargs):
        super().__init__(reason=reason, **kwargs)


class NotOwner(CustomError):
    error_name = 'FundMe__NotOwner'
