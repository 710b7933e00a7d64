import importlib
import sys
from unittest import TestCase
from fundme.db.driver import ContractDriver
from fundme.execution.module import DatabaseFinder, DatabaseLoader, MODULE_CACHE, install_database_loader, \
    uninstall_database_loader, enable_restricted_imports, disable_restricted_imports, clear_module_cache
from fundme.execution.runtime import rt

driver = ContractDriver()


class TestDatabaseLoader(TestCase):
    def setUp(self):
        driver.flush()
        clear_module_cache()
        driver.set_contract(name='stubucks', code='supply = 100')
        driver.commit()

        install_database_loader(driver=driver)

    def tearDown(self):
        rt.clean_up()
        uninstall_database_loader()
        clear_module_cache()
        driver.flush()

    def test_install_puts_finder_first(self):
        self.assertIs(sys.meta_path[0], DatabaseFinder)

    def test_uninstall(self):
        uninstall_database_loader()
        self.assertNotIn(DatabaseFinder, sys.meta_path)

    def test_find_spec(self):
        spec = DatabaseFinder.find_spec('stubucks')
        self.assertIsInstance(spec.loader, DatabaseLoader)

    def test_find_spec_unknown_contract(self):
        self.assertIsNone(DatabaseFinder.find_spec('nothing_here'))

    def test_find_spec_ignores_dotted_names(self):
        self.assertIsNone(DatabaseFinder.find_spec('stubucks.supply'))

    def test_import_contract(self):
        module = importlib.import_module('stubucks')

        self.assertEqual(module.supply, 100)
        self.assertIn('stubucks', rt.loaded_modules)
        self.assertEqual(len(MODULE_CACHE), 1)

    def test_clean_up_unloads_contract(self):
        importlib.import_module('stubucks')
        rt.clean_up()

        self.assertNotIn('stubucks', sys.modules)


class TestRestrictedImports(TestCase):
    def setUp(self):
        driver.flush()
        driver.set_contract(name='stubucks', code='supply = 100')
        driver.commit()

        install_database_loader(driver=driver)

    def tearDown(self):
        disable_restricted_imports()
        rt.clean_up()
        uninstall_database_loader()
        driver.flush()

    def test_contract_cannot_import_stdlib(self):
        enable_restricted_imports()

        with self.assertRaises(ImportError):
            exec('import os', {'__contract__': True})

    def test_contract_can_import_contract(self):
        scope = {'__contract__': True}

        enable_restricted_imports()
        exec('import stubucks', scope)

        self.assertEqual(scope['stubucks'].supply, 100)

    def test_regular_code_unaffected(self):
        scope = {}

        enable_restricted_imports()
        exec('import os', scope)

        self.assertIn('os', scope)

    def test_disable_restores_builtin_import(self):
        enable_restricted_imports()
        disable_restricted_imports()

        scope = {'__contract__': True}
        exec('import os', scope)

        self.assertIn('os', scope)
