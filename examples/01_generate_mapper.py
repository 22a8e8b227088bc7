"""
Example 01: Generate a Mapper

This example writes a model and a view-model declaration file, then
generates the mapper module between them.
"""

import json
import logging
import tempfile
from pathlib import Path

from ts_mapper import generate_mappers

MODEL = """
import { Address } from './address'

export interface Organization {
  id: number
  name: string | null
  address: Address
  website?: string
}
"""

VIEW_MODEL = """
export interface OrganizationViewModel {
  id: number
  name: string
  website: string | undefined
  memberCount: number
}
"""


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    project = Path(tempfile.mkdtemp())
    (project / "model").mkdir()
    (project / "view-model").mkdir()
    (project / "model" / "organization.ts").write_text(MODEL)
    (project / "model" / "address.ts").write_text("export interface Address { street: string }")
    (project / "view-model" / "organization.ts").write_text(VIEW_MODEL)

    config = project / "mapping.json"
    config.write_text(
        json.dumps(
            [
                {
                    "source": str(project / "model" / "organization.ts"),
                    "target": str(project / "view-model" / "organization.ts"),
                    "viceVersa": True,
                }
            ]
        )
    )

    output = project / "mapper.ts"
    artifact = generate_mappers(config, output)

    print("=== Mapping Plans ===\n")
    for plan in artifact.mappers:
        print(f"{plan.source_entity_name} -> {plan.target_entity_name}")
        print(f"   auto-mapped: {plan.auto_mapped}")
        print(f"   custom map required: {plan.custom_required}")
    print()

    print("=== Generated mapper.ts ===\n")
    print(output.read_text())


if __name__ == "__main__":
    main()
