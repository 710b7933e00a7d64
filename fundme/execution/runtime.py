import sys
from fundme import config
from fundme.execution.metering import GasMeter


class Context:
    """Who is running right now.

    The bottom frame is the transaction itself. Every call that crosses into
    another contract pushes a frame whose caller is the contract that made
    the call; the signer never changes and value is only seen by the first
    contract.
    """
    def __init__(self, maxlen=config.MAX_CALL_DEPTH):
        self._maxlen = maxlen
        self._frames = []
        self.begin(this=None, caller=None, signer=None)

    def begin(self, this, caller, signer, value=0):
        self._frames = [{'this': this, 'caller': caller, 'signer': signer, 'value': value}]

    def enter(self, contract, caller=None):
        top = self._frames[-1]
        if top['this'] == contract:
            return False

        assert len(self._frames) <= self._maxlen, 'Call depth limit of {} reached.'.format(self._maxlen)

        self._frames.append({
            'this': contract,
            'caller': top['this'] if caller is None else caller,
            'signer': top['signer'],
            'value': 0
        })
        return True

    def leave(self):
        if len(self._frames) > 1:
            self._frames.pop()

    @property
    def depth(self):
        return len(self._frames) - 1

    @property
    def this(self):
        return self._frames[-1]['this']

    @property
    def caller(self):
        return self._frames[-1]['caller']

    @property
    def signer(self):
        return self._frames[-1]['signer']

    @property
    def value(self):
        return self._frames[-1]['value']


class Runtime:
    # Shared by every contract module for the transaction being executed
    env = {}
    loaded_modules = []
    tracer = GasMeter()
    context = Context()

    @classmethod
    def set_up(cls, gas_limit, meter):
        if meter:
            cls.tracer.set_limit(gas_limit)
            cls.tracer.start()

    @classmethod
    def clean_up(cls):
        cls.tracer.reset()

        while cls.loaded_modules:
            sys.modules.pop(cls.loaded_modules.pop(), None)

        cls.env = {}
        cls.context.begin(this=None, caller=None, signer=None)

    @classmethod
    def deduct_call(cls):
        cls.tracer.add_cost(config.CALL_GAS)

    @classmethod
    def deduct_read(cls, key, value):
        cls.tracer.add_cost((len(key) + len(value)) * config.READ_COST_PER_BYTE)

    @classmethod
    def deduct_write(cls, key, value):
        cls.tracer.add_cost((len(key) + len(value)) * config.WRITE_COST_PER_BYTE)


rt = Runtime()
