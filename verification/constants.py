from pathlib import Path

import verification

#
# Filesystem
#

VERIFICATION_DIR = Path(verification.__file__).parent
PARAMS_DIR = VERIFICATION_DIR.parent / "params"

#
# Explorer API
#

# Etherscan v2 serves every supported chain from one endpoint; the chain is
# selected with the `chainid` query parameter.
ETHERSCAN_V2_ENDPOINT = "https://api.etherscan.io/v2/api"
ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"
ETHERSCAN_API_KEY_LENGTH = 34

DEFAULT_REQUEST_TIMEOUT = 60  # seconds

# routing fields; query string only
CHAIN_ID_PARAM = "chainid"
API_KEY_PARAM = "apikey"
ROUTING_PARAMS = (CHAIN_ID_PARAM, API_KEY_PARAM)

CONTRACT_MODULE = "contract"
VERIFY_SOURCE_ACTION = "verifysourcecode"
CHECK_STATUS_ACTION = "checkverifystatus"
SINGLE_FILE_CODE_FORMAT = "solidity-single-file"

STATUS_OK = "1"

#
# Polling
#

POLL_INTERVAL = 5  # seconds
MAX_POLL_ATTEMPTS = 12

PASS_PREFIX = "Pass"
FAIL_MARKER = "Fail"

#
# Compiler
#

DEFAULT_OPTIMIZER_RUNS = 200
COMPILER_VERSION_PATTERN = r"^v\d+\.\d+\.\d+\+commit\.[0-9a-f]{8}$"

#
# Licenses (explorer license type codes)
#

LICENSE_CODES = {
    1: "No License (None)",
    2: "The Unlicense (Unlicense)",
    3: "MIT License (MIT)",
    4: "GNU General Public License v2.0 (GNU GPLv2)",
    5: "GNU General Public License v3.0 (GNU GPLv3)",
    6: "GNU Lesser General Public License v2.1 (GNU LGPLv2.1)",
    7: "GNU Lesser General Public License v3.0 (GNU LGPLv3)",
    8: "BSD 2-clause \"Simplified\" license (BSD-2-Clause)",
    9: "BSD 3-clause \"New\" Or \"Revised\" license (BSD-3-Clause)",
    10: "Mozilla Public License 2.0 (MPL-2.0)",
    11: "Open Software License 3.0 (OSL-3.0)",
    12: "Apache 2.0 (Apache-2.0)",
    13: "GNU Affero General Public License (GNU AGPLv3)",
    14: "Business Source License (BSL 1.1)",
}

NO_LICENSE = 1

SPDX_LICENSE_CODES = {
    "UNLICENSED": 1,
    "Unlicense": 2,
    "MIT": 3,
    "GPL-2.0": 4,
    "GPL-2.0-only": 4,
    "GPL-2.0-or-later": 4,
    "GPL-3.0": 5,
    "GPL-3.0-only": 5,
    "GPL-3.0-or-later": 5,
    "LGPL-2.1": 6,
    "LGPL-2.1-only": 6,
    "LGPL-2.1-or-later": 6,
    "LGPL-3.0": 7,
    "LGPL-3.0-only": 7,
    "LGPL-3.0-or-later": 7,
    "BSD-2-Clause": 8,
    "BSD-3-Clause": 9,
    "MPL-2.0": 10,
    "OSL-3.0": 11,
    "Apache-2.0": 12,
    "AGPL-3.0": 13,
    "AGPL-3.0-only": 13,
    "AGPL-3.0-or-later": 13,
    "BUSL-1.1": 14,
}

#
# Networks
#

ETHEREUM_MAINNET = 1
SEPOLIA = 11155111
POLYGON_MAINNET = 137
POLYGON_AMOY = 80002

NETWORKS = {
    ETHEREUM_MAINNET: "Ethereum Mainnet",
    SEPOLIA: "Sepolia Testnet",
    17000: "Holesky Testnet",
    10: "OP Mainnet",
    56: "BNB Smart Chain Mainnet",
    100: "Gnosis",
    POLYGON_MAINNET: "Polygon Mainnet",
    POLYGON_AMOY: "Polygon Amoy Testnet",
    8453: "Base Mainnet",
    84532: "Base Sepolia Testnet",
    42161: "Arbitrum One Mainnet",
    421614: "Arbitrum Sepolia Testnet",
    43114: "Avalanche C-Chain",
    59144: "Linea Mainnet",
    534352: "Scroll Mainnet",
}

NETWORK_EXPLORERS = {
    ETHEREUM_MAINNET: "https://etherscan.io",
    SEPOLIA: "https://sepolia.etherscan.io",
    17000: "https://holesky.etherscan.io",
    10: "https://optimistic.etherscan.io",
    56: "https://bscscan.com",
    100: "https://gnosisscan.io",
    POLYGON_MAINNET: "https://polygonscan.com",
    POLYGON_AMOY: "https://amoy.polygonscan.com",
    8453: "https://basescan.org",
    84532: "https://sepolia.basescan.org",
    42161: "https://arbiscan.io",
    421614: "https://sepolia.arbiscan.io",
    43114: "https://snowtrace.io",
    59144: "https://lineascan.build",
    534352: "https://scrollscan.com",
}
