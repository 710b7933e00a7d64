from fundme import config
from fundme.exceptions import OutOfGas


class GasMeter:
    """Counts gas for a single transaction.

    Costs only accrue while the meter is started, so reads and writes made by the
    executor itself (funding checks, gas payment) are free.
    """
    def __init__(self):
        self.limit = 0
        self.used = 0
        self.started = False

    def set_limit(self, limit):
        self.limit = limit

    def start(self):
        self.used = config.BASE_TX_GAS
        self.started = True
        self._check()

    def stop(self):
        self.started = False

    def reset(self):
        self.stop()
        self.used = 0
        self.limit = 0

    def is_started(self):
        return self.started

    def add_cost(self, cost):
        if not self.started:
            return
        self.used += cost
        self._check()

    def get_gas_used(self):
        return min(self.used, self.limit) if self.limit else self.used

    def _check(self):
        if self.limit and self.used > self.limit:
            used = self.used
            self.used = self.limit
            self.stop()
            raise OutOfGas(used=used, limit=self.limit)
