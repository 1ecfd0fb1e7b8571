from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from .config import REMAPPINGS_FILE

class Remapping(BaseModel):
    """A (prefix, target) rewrite rule read from remappings.txt or foundry.toml."""
    model_config = ConfigDict(frozen=True)

    prefix: str = Field(..., min_length=1, description="Text to look for in the import path (e.g. 'forge-std/')")
    target: str = Field(..., description="Replacement text (e.g. 'lib/forge-std/src/')")
    origin: str = REMAPPINGS_FILE  # remappings.txt or foundry.toml

    def __str__(self) -> str:
        return f"{self.prefix}={self.target}"

class ImportResolution(BaseModel):
    """Outcome of resolving one import path."""
    import_path: str
    resolved: Optional[str] = None # Absolute path of the target file
    strategy: Optional[str] = None # relative, npm, ethpm, foundry

    @property
    def found(self) -> bool:
        return self.resolved is not None
