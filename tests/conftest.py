import os
import sys
import tempfile
from os.path import dirname, abspath

root_dir = dirname(dirname(abspath(__file__)))
sys.path.append(root_dir)

# Keep server logs out of the user's home directory
os.environ.setdefault("SOLIMPORT_LOG_DIR", tempfile.mkdtemp(prefix="solimport-logs-"))
