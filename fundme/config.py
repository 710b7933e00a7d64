import os

# Storage keys look like <contract>.<variable>:<k1>:<k2>
INDEX_SEPARATOR = '.'
DELIMITER = ':'

CODE_KEY = '__code__'
COMPILED_KEY = '__compiled__'
AUTHOR_KEY = '__author__'

# Contract language
EXPORT_DECORATOR = 'export'
CONSTRUCTOR_DECORATOR = 'construct'
DECORATORS = {EXPORT_DECORATOR, CONSTRUCTOR_DECORATOR}
PRIVATE_PREFIX = '__'
CONSTRUCTOR_NAME = '____'
STORAGE_TYPES = {'Variable', 'Hash', 'Array'}

MAX_KEY_DIMENSIONS = 16
MAX_KEY_LENGTH = 1024
MAX_CALL_DEPTH = 1024

# Native currency lives in a reserved hash: currency.balances:<address>
CURRENCY_CONTRACT = 'currency'
BALANCES_HASH = 'balances'
SUBMISSION_CONTRACT = 'submission'
RESERVED_NAMES = {CURRENCY_CONTRACT, SUBMISSION_CONTRACT}

# Gas
BASE_TX_GAS = 21000
CALL_GAS = 700
READ_COST_PER_BYTE = 3
WRITE_COST_PER_BYTE = 25
DEFAULT_GAS_LIMIT = 30000000
DEFAULT_GAS_PRICE = 10 ** 9

WEI_PER_ETHER = 10 ** 18

# Accounts
NUM_ACCOUNTS = 20
DEFAULT_ACCOUNT_BALANCE = 10000 * WEI_PER_ETHER

# Mock price feed
DECIMALS = 8
INITIAL_ANSWER = 2000 * 10 ** DECIMALS

NETWORK = os.getenv('FUNDME_NETWORK', 'hardhat')
DEVELOPMENT_CHAINS = {'hardhat', 'localhost'}

NETWORK_CONFIG = {
    'hardhat': {
        'chain_id': 31337,
    },
    'localhost': {
        'chain_id': 31337,
    },
    'sepolia': {
        'chain_id': 11155111,
        'eth_usd_price_feed': '0x694AA1769357215DE4FAC081bf1f309aDC325306',
    },
    'mainnet': {
        'chain_id': 1,
        'eth_usd_price_feed': '0x5f4eC3Df9cbd43714FE2740f5E3616155c5b8419',
    },
}
