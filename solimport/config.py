import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file in the working directory
load_dotenv()

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).resolve().parent.parent
STORE_ROOT = Path(os.getenv("SOLIMPORT_HOME", str(Path.home() / ".solimport")))
LOG_DIR = Path(os.getenv("SOLIMPORT_LOG_DIR", str(STORE_ROOT / "logs")))
LOG_LEVEL = os.getenv("SOLIMPORT_LOG_LEVEL", "INFO").upper()

# --- Foundry ---
REMAPPINGS_FILE = "remappings.txt"
FOUNDRY_CONFIG_FILE = "foundry.toml"
FOUNDRY_PROFILE = "default"
FOUNDRY_LIB_DIR = "lib"
FOUNDRY_SRC_DIR = "src"

# --- npm / EthPM ---
NODE_MODULES_DIR = "node_modules"
INSTALLED_CONTRACTS_DIR = "installed_contracts"
ETHPM_CONTRACTS_DIR = "contracts"

# Files whose changes invalidate cached remappings for a directory
REMAPPING_SOURCES = (REMAPPINGS_FILE, FOUNDRY_CONFIG_FILE)
