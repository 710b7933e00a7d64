MINIMUM_USD = 50 * 10 ** 18

owner_address = Variable()
price_feed_address = Variable()
amounts = Hash(default_value=0)
funder_list = Array()

price_feed_interface = [
    importlib.Func('latest_round_data'),
    importlib.Func('decimals'),
    importlib.Func('version'),
]


@construct
def seed(price_feed: str):
    owner_address.set(ctx.caller)
    price_feed_address.set(price_feed)


def require_owner():
    if ctx.caller != owner_address.get():
        raise NotOwner()


def get_feed():
    address = price_feed_address.get()
    assert importlib.exists(address), 'No price feed deployed at {}.'.format(address)

    feed = importlib.import_module(address)
    assert importlib.enforce_interface(feed, price_feed_interface), 'Price feed does not implement the aggregator interface.'
    return feed


def get_price():
    # Scaled to 18 decimals to match wei
    feed = get_feed()
    round_id, answer, started_at, updated_at, answered_in_round = feed.latest_round_data()
    return answer * 10 ** (18 - feed.decimals())


def get_conversion_rate(eth_amount):
    return get_price() * eth_amount // 10 ** 18


@export
def fund():
    if get_conversion_rate(ctx.value) < MINIMUM_USD:
        raise InsufficientContribution('You need to spend more ETH!')

    amounts[ctx.caller] += ctx.value
    funder_list.append(ctx.caller)


@export
def receive():
    fund()


@export
def withdraw():
    require_owner()

    for funder in funder_list:
        amounts[funder] = 0

    funder_list.clear()

    transfer(to=owner_address.get(), amount=balance_of(ctx.this))


@export
def price_feed():
    return price_feed_address.get()


@export
def address_to_amount_funded(funder: str):
    return amounts[funder]


@export
def funders(index: int):
    return funder_list[index]


@export
def owner():
    return owner_address.get()


@export
def version():
    return get_feed().version()
