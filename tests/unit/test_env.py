from unittest import TestCase
from fundme.db.driver import ContractDriver
from fundme.db.orm import Variable
from fundme.execution.runtime import rt
from fundme.stdlib import env


class TestEnv(TestCase):
    def tearDown(self):
        rt.clean_up()

    def test_gather(self):
        scope = env.gather()

        self.assertSetEqual(set(scope), {
            'Variable', 'Hash', 'Array', '__Contract',
            'importlib',
            '__export', 'ctx', 'rt', 'Any',
            'balance_of', 'transfer',
            'Revert', 'CustomError', 'IndexOutOfRange', 'InsufficientContribution', 'NotOwner',
        })

    def test_importlib_members(self):
        importlib = env.gather()['importlib']

        for name in ('exists', 'import_module', 'enforce_interface', 'Func'):
            self.assertTrue(hasattr(importlib, name))

        self.assertFalse(hasattr(importlib, 'Var'))

    def test_storage_uses_active_driver(self):
        driver = ContractDriver()
        rt.env['__Driver'] = driver

        v = env.gather()['Variable'](contract='stubucks', name='supply')

        self.assertIsInstance(v, Variable)
        self.assertIs(v._driver, driver)

    def test_export_keeps_wrapped_function(self):
        def supply():
            return 100

        wrapped = env.gather()['__export']('stubucks')(supply)

        self.assertIs(wrapped.__wrapped__, supply)
        self.assertEqual(wrapped(), 100)
