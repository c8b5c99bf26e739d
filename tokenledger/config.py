LEDGER_NAME = 'ledger'

ZERO_ADDRESS = '0x' + '0' * 40

MAX_UINT256 = 2 ** 256 - 1

# Receipt hook return values expected from programmatic holders
ON_RECEIVED_SELECTOR = '0xf23a6e61'
ON_BATCH_RECEIVED_SELECTOR = '0xbc197c81'

DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_HASH_DIMENSIONS = 16
MAX_KEY_SIZE = 1024

OWNER_KEY = '__owner__'
SEQUENCE_KEY = '__sequence__'
INITIALIZED_KEY = '__initialized__'

PRIVATE_METHOD_PREFIX = '_'
EXPORT_ATTRIBUTE = '__exported__'
