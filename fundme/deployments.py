import os

from fundme import config
from fundme.logger import get_logger

log = get_logger('Deployments')

CONTRACTS_DIR = os.path.join(os.path.dirname(__file__), 'contracts')

MOCK_NAME = 'mock_v3_aggregator'
FUND_ME_NAME = 'fund_me'


def contract_source(name):
    with open(os.path.join(CONTRACTS_DIR, '{}.s.py'.format(name))) as f:
        return f.read()


def deploy_mocks(client, deployer, network):
    if network not in config.DEVELOPMENT_CHAINS:
        log.info('Network {} has a live price feed, skipping mocks'.format(network))
        return {}

    log.deploy('Deploying {} to {}'.format(MOCK_NAME, network))

    mock = client.submit(contract_source(MOCK_NAME),
                         name=MOCK_NAME,
                         constructor_args={
                             'decimals': config.DECIMALS,
                             'initial_answer': config.INITIAL_ANSWER
                         },
                         signer=deployer)

    return {MOCK_NAME: mock}


def deploy_fund_me(client, deployer, network):
    if network in config.DEVELOPMENT_CHAINS:
        assert client.get_contract(MOCK_NAME) is not None, 'Deploy the mocks before {} on {}.'.format(
            FUND_ME_NAME, network
        )
        price_feed = MOCK_NAME
    else:
        price_feed = config.NETWORK_CONFIG[network]['eth_usd_price_feed']

    log.deploy('Deploying {} to {} with price feed {}'.format(FUND_ME_NAME, network, price_feed))

    fund_me = client.submit(contract_source(FUND_ME_NAME),
                            name=FUND_ME_NAME,
                            constructor_args={'price_feed': price_feed},
                            signer=deployer)

    return {FUND_ME_NAME: fund_me}


# Deploy scripts run in order; a script runs when any of its tags is requested
DEPLOY_SCRIPTS = [
    (deploy_mocks, {'all', 'mocks'}),
    (deploy_fund_me, {'all', 'fundme'}),
]


def deploy(client, tags=('all',), network=None):
    network = network or config.NETWORK
    assert network in config.NETWORK_CONFIG, 'Unknown network {}. Known networks are {}'.format(
        network, sorted(config.NETWORK_CONFIG)
    )

    deployer = client.accounts.deployer

    deployed = {}
    for script, script_tags in DEPLOY_SCRIPTS:
        if script_tags & set(tags):
            deployed.update(script(client, deployer, network))

    return deployed


def fixture(client, tags=('all',), network=None):
    """Resets the client to genesis and runs the deploy scripts matching ``tags``."""
    client.flush()
    return deploy(client, tags=tags, network=network)
