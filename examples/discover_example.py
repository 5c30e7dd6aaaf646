"""Example script showing how to query the component catalog programmatically."""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from catalog import CatalogConfig, ComponentCatalog  # type: ignore  # noqa: E402


async def main(root: Path) -> None:
    catalog = ComponentCatalog(CatalogConfig(root=root))
    try:
        await catalog.initialize()
        for record in catalog.get_all_components():
            print(record.model_dump_json())
    finally:
        await catalog.aclose()


if __name__ == "__main__":
    asyncio.run(main(Path(sys.argv[1]) if len(sys.argv) > 1 else PROJECT_ROOT.parent / "gluestack-ui"))
