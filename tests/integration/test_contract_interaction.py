from unittest import TestCase
from fundme.client import ContractingClient
from fundme.exceptions import CompilationException, OutOfGas, Revert


def vault():
    deposits = Hash(default_value=0)

    @export
    def deposit():
        deposits[ctx.caller] += ctx.value

    @export
    def release(to: str, amount: int):
        assert deposits[ctx.caller] >= amount, 'Not enough deposited.'
        deposits[ctx.caller] -= amount
        transfer(to=to, amount=amount)

    @export
    def who():
        return ctx.this, ctx.caller, ctx.signer, ctx.value


def proxy():
    @export
    def who_via(name: str):
        target = importlib.import_module(name)
        return target.who()

    @export
    def load(name: str):
        importlib.import_module(name)

    @export
    def deployed(name: str):
        return importlib.exists(name)


def spinner():
    counter = Variable()

    @export
    def spin():
        for i in range(100000):
            counter.set(i)


def os_importer():
    import os

    @export
    def cwd():
        return os.getcwd()


class TestContractInteraction(TestCase):
    def setUp(self):
        self.c = ContractingClient()
        self.c.flush()

        self.vault = self.c.submit(vault)
        self.proxy = self.c.submit(proxy)

    def tearDown(self):
        self.c.flush()

    def test_cross_contract_context(self):
        signer = self.c.signer
        self.assertEqual(self.proxy.who_via(name='vault'), ('vault', 'proxy', signer, 0))

    def test_value_only_visible_to_called_contract(self):
        result = self.vault.who(value=10 ** 18)
        self.assertEqual(result[3], 10 ** 18)

    def test_transfer_out_of_contract(self):
        self.vault.deposit(value=10 ** 18)
        self.vault.release(to='0xabc', amount=4 * 10 ** 17)

        self.assertEqual(self.c.get_balance('0xabc'), 4 * 10 ** 17)
        self.assertEqual(self.c.get_balance('vault'), 6 * 10 ** 17)

    def test_failed_release_reverts(self):
        self.vault.deposit(value=10 ** 18)

        with self.assertRaises(Revert) as cm:
            self.vault.connect(self.c.accounts[1]).release(to='0xabc', amount=1)

        self.assertEqual(cm.exception.reason, 'Not enough deposited.')
        self.assertEqual(self.c.get_balance('vault'), 10 ** 18)

    def test_stdlib_import_rejected_at_submission(self):
        with self.assertRaises(CompilationException):
            self.c.submit(os_importer)

    def test_stdlib_import_rejected_at_runtime(self):
        with self.assertRaises(ImportError):
            self.proxy.load(name='os')

    def test_missing_contract_import(self):
        with self.assertRaises(ImportError):
            self.proxy.load(name='nothing_here')

    def test_exists(self):
        self.assertTrue(self.proxy.deployed(name='vault'))
        self.assertFalse(self.proxy.deployed(name='nothing_here'))

    def test_out_of_gas(self):
        spinner_contract = self.c.submit(spinner)

        with self.assertRaises(OutOfGas):
            spinner_contract.spin(gas_limit=100000)

        self.assertIsNone(self.c.get_var('spinner', 'counter'))
