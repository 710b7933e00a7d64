from fundme.db.orm import Variable, Hash, Array
from fundme.db.contract import Contract
from fundme.execution.runtime import rt


def _bound(cls):
    # Storage made inside a transaction writes through that transaction's driver
    def __init__(self, *args, **kwargs):
        driver = rt.env.get('__Driver')
        if driver is not None:
            kwargs['driver'] = driver
        cls.__init__(self, *args, **kwargs)

    return type(cls.__name__, (cls,), {'__init__': __init__})


exports = {
    'Variable': _bound(Variable),
    'Hash': _bound(Hash),
    'Array': _bound(Array),
    '__Contract': _bound(Contract),
}
