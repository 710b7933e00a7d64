from fundme.stdlib.bridge import access, currency, errors, imports, orm

BRIDGES = (orm, imports, access, currency, errors)


def gather():
    """Names every contract module starts with."""
    scope = {}
    for bridge in BRIDGES:
        scope.update(bridge.exports)
    return scope
