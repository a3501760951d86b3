#!/usr/bin/env python3
"""Quick live check of the opportunity and search APIs.

Run (uses PROPOSAL_ENRICHER_* env vars, defaults to localhost services):
  poetry run python scripts/check_live_services.py                    # OPP-1, "Jane Doe"
  poetry run python scripts/check_live_services.py OPP-7 "John Smith"
"""

import sys

from proposal_enricher.clients import EmployeeSearchClient, OpportunityClient
from proposal_enricher.config import EnrichmentConfig
from proposal_enricher.errors import EnrichmentError


def main() -> None:
    opportunity_number = sys.argv[1] if len(sys.argv) > 1 else "OPP-1"
    proposed_by = sys.argv[2] if len(sys.argv) > 2 else "Jane Doe"
    config = EnrichmentConfig.from_env()

    print(f"Fetching opportunity {opportunity_number} from {config.opportunity_api_base}...")
    try:
        record = OpportunityClient(config).get_opportunity(opportunity_number)
        print(f"  {record.proposal_name} for {record.client_name} ({record.status}, value={record.value})")
    except EnrichmentError as e:
        print(f"  ⚠️ {e}")

    print(f"Searching {config.search_index} for {proposed_by!r} at {config.search_api_base}...")
    try:
        hit = EmployeeSearchClient(config).top_hit(proposed_by)
        if hit:
            print(f"  {hit.name} <{hit.email}> {hit.role} / {hit.department}")
        else:
            print("  No hits.")
    except EnrichmentError as e:
        print(f"  ⚠️ {e}")


if __name__ == "__main__":
    main()
