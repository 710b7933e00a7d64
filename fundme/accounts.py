import hashlib

from fundme import config


def make_address(index: int, seed='fundme'):
    hasher = hashlib.sha3_256()
    hasher.update('{}:{}'.format(seed, index).encode())
    return '0x' + hasher.hexdigest()[:40]


class Accounts:
    """Deterministic test signers, funded at genesis.

    ``named`` maps roles to signers the way deploy scripts refer to them;
    the deployer is always the first signer.
    """
    def __init__(self, count=config.NUM_ACCOUNTS, balance=config.DEFAULT_ACCOUNT_BALANCE, seed='fundme'):
        self.balance = balance
        self.signers = [make_address(i, seed) for i in range(count)]
        self.named = {
            'deployer': self.signers[0],
        }

    @property
    def deployer(self):
        return self.named['deployer']

    def get_signers(self):
        return list(self.signers)

    def get_named_accounts(self):
        return dict(self.named)

    def seed(self, driver):
        for address in self.signers:
            driver.set_balance(address, self.balance)

    def __getitem__(self, index):
        return self.signers[index]

    def __len__(self):
        return len(self.signers)

    def __iter__(self):
        return iter(self.signers)
