from unittest import TestCase
from fundme.execution import runtime
from fundme.execution.metering import GasMeter
from fundme.exceptions import OutOfGas
from fundme import config


class TestContext(TestCase):
    def setUp(self):
        self.c = runtime.Context(maxlen=2)
        self.c.begin(this='fund_me', caller='stu', signer='stu', value=10)

    def test_begin(self):
        self.assertEqual(self.c.this, 'fund_me')
        self.assertEqual(self.c.caller, 'stu')
        self.assertEqual(self.c.signer, 'stu')
        self.assertEqual(self.c.value, 10)
        self.assertEqual(self.c.depth, 0)

    def test_enter_switches_context(self):
        entered = self.c.enter('feed')

        self.assertTrue(entered)
        self.assertEqual(self.c.this, 'feed')
        self.assertEqual(self.c.caller, 'fund_me')
        self.assertEqual(self.c.signer, 'stu')
        self.assertEqual(self.c.value, 0)
        self.assertEqual(self.c.depth, 1)

        self.c.leave()

        self.assertEqual(self.c.this, 'fund_me')
        self.assertEqual(self.c.caller, 'stu')

    def test_enter_with_explicit_caller(self):
        self.c.enter('new_contract', caller='colin')

        self.assertEqual(self.c.this, 'new_contract')
        self.assertEqual(self.c.caller, 'colin')

    def test_same_contract_does_not_enter(self):
        self.assertFalse(self.c.enter('fund_me'))
        self.assertEqual(self.c.caller, 'stu')
        self.assertEqual(self.c.depth, 0)

    def test_depth_limit(self):
        self.c.enter('a')
        self.c.enter('b')

        with self.assertRaises(AssertionError):
            self.c.enter('c')

    def test_leave_keeps_base_frame(self):
        self.c.leave()
        self.assertEqual(self.c.this, 'fund_me')

    def test_begin_drops_frames(self):
        self.c.enter('a')
        self.c.begin(this='other', caller='colin', signer='colin')

        self.assertEqual(self.c.this, 'other')
        self.assertEqual(self.c.value, 0)
        self.assertEqual(self.c.depth, 0)


class TestGasMeter(TestCase):
    def setUp(self):
        self.m = GasMeter()

    def test_start_charges_base_cost(self):
        self.m.set_limit(100000)
        self.m.start()
        self.assertEqual(self.m.get_gas_used(), config.BASE_TX_GAS)

    def test_add_cost(self):
        self.m.set_limit(100000)
        self.m.start()
        self.m.add_cost(100)
        self.assertEqual(self.m.get_gas_used(), config.BASE_TX_GAS + 100)

    def test_costs_ignored_when_stopped(self):
        self.m.set_limit(100000)
        self.m.start()
        self.m.stop()
        self.m.add_cost(100)
        self.assertEqual(self.m.get_gas_used(), config.BASE_TX_GAS)

    def test_out_of_gas(self):
        self.m.set_limit(config.BASE_TX_GAS + 10)
        self.m.start()

        with self.assertRaises(OutOfGas) as cm:
            self.m.add_cost(11)

        self.assertEqual(cm.exception.reason, 'out of gas')
        self.assertEqual(self.m.get_gas_used(), config.BASE_TX_GAS + 10)
        self.assertFalse(self.m.is_started())

    def test_limit_below_base_cost(self):
        self.m.set_limit(100)

        with self.assertRaises(OutOfGas):
            self.m.start()

        self.assertEqual(self.m.get_gas_used(), 100)

    def test_reset(self):
        self.m.set_limit(100000)
        self.m.start()
        self.m.reset()

        self.assertFalse(self.m.is_started())
        self.assertEqual(self.m.get_gas_used(), 0)


class TestRuntime(TestCase):
    def tearDown(self):
        runtime.rt.tracer.stop()
        runtime.rt.clean_up()

    def test_set_up_with_metering_starts_tracer(self):
        runtime.rt.set_up(gas_limit=100000, meter=True)
        self.assertTrue(runtime.rt.tracer.is_started())

    def test_set_up_without_metering_records_no_gas(self):
        runtime.rt.set_up(gas_limit=100000, meter=False)
        runtime.rt.deduct_write(b'key', b'value')
        self.assertEqual(runtime.rt.tracer.get_gas_used(), 0)

    def test_deduct_write(self):
        runtime.rt.set_up(gas_limit=100000, meter=True)
        runtime.rt.deduct_write(b'key', b'value')

        used = runtime.rt.tracer.get_gas_used()
        self.assertEqual(used, config.BASE_TX_GAS + 8 * config.WRITE_COST_PER_BYTE)

    def test_deduct_read(self):
        runtime.rt.set_up(gas_limit=100000, meter=True)
        runtime.rt.deduct_read(b'key', b'value')

        used = runtime.rt.tracer.get_gas_used()
        self.assertEqual(used, config.BASE_TX_GAS + 8 * config.READ_COST_PER_BYTE)

    def test_deduct_call(self):
        runtime.rt.set_up(gas_limit=100000, meter=True)
        runtime.rt.deduct_call()

        self.assertEqual(runtime.rt.tracer.get_gas_used(), config.BASE_TX_GAS + config.CALL_GAS)

    def test_clean_up_resets_env(self):
        runtime.rt.env.update({'now': 1})
        runtime.rt.clean_up()
        self.assertDictEqual(runtime.rt.env, {})

    def test_clean_up_resets_context(self):
        runtime.rt.context.begin(this='fund_me', caller='stu', signer='stu', value=1)
        runtime.rt.context.enter('feed')

        runtime.rt.clean_up()

        self.assertIsNone(runtime.rt.context.this)
        self.assertEqual(runtime.rt.context.depth, 0)
