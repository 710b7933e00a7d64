@__export('submission')
def submit_contract(name: str, code: str, constructor_args: dict={}):
    __Contract().submit(name=name, code=code, author=ctx.caller, constructor_args=constructor_args)
