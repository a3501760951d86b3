"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="proposal-enricher",
        description="Create and update proposals with opportunity and employee enrichment",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=Path("proposals.db"),
        help="Path to SQLite database",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to enrichment config YAML (default: PROPOSAL_ENRICHER_* env vars)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log enrichment steps")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # create
    create_parser = subparsers.add_parser("create", help="Create a proposal (enrichment failures abort)")
    _add_payload_arguments(create_parser)

    # update
    update_parser = subparsers.add_parser("update", help="Update a proposal (enrichment failures are logged)")
    update_parser.add_argument("id", type=int, help="Proposal id")
    _add_payload_arguments(update_parser)

    # show
    show_parser = subparsers.add_parser("show", help="Show a stored proposal")
    show_parser.add_argument("id", type=int, help="Proposal id")
    show_parser.add_argument(
        "--populate",
        action="store_true",
        help="Include the linked employee record",
    )

    # employees
    employees_parser = subparsers.add_parser("employees", help="Query the local employee store")
    employees_parser.add_argument("action", choices=["list"], help="List employees")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "create":
        _run_create(args)
    elif args.command == "update":
        _run_update(args)
    elif args.command == "show":
        _run_show(args)
    elif args.command == "employees":
        _run_employees(args)
    else:
        parser.print_help()


def _add_payload_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("--opportunity-number", type=str, default=None, help="Opportunity to fetch details for")
    subparser.add_argument("--proposed-by", type=str, default=None, help="Free-text name of the proposer")
    subparser.add_argument(
        "--field",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra payload field (repeatable), e.g. --field pstatus=Draft",
    )


def _parse_fields(pairs: list[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise SystemExit(f"Invalid --field {pair!r}. Use KEY=VALUE.")
        fields[key.strip()] = value
    return fields


def _payload_from_args(args: argparse.Namespace):
    from pydantic import ValidationError

    from proposal_enricher.models.proposal import ProposalPayload

    data: dict = _parse_fields(args.field)
    if args.opportunity_number is not None:
        data["opportunityNumber"] = args.opportunity_number
    if args.proposed_by is not None:
        data["proposedBy"] = args.proposed_by
    try:
        return ProposalPayload.model_validate(data)
    except ValidationError as e:
        raise SystemExit(f"Invalid --field value: {e}") from e


def _build_service(args: argparse.Namespace):
    from proposal_enricher.config import EnrichmentConfig
    from proposal_enricher.lifecycles import ProposalLifecycle
    from proposal_enricher.service import ProposalService
    from proposal_enricher.store import ProposalStore

    config = EnrichmentConfig.from_yaml(args.config) if args.config else EnrichmentConfig.from_env()
    lifecycle = ProposalLifecycle.from_config(config, args.db)
    return ProposalService(lifecycle, ProposalStore(args.db))


def _print_proposal(proposal) -> None:
    from proposal_enricher.richtext import from_rich_text

    data = proposal.model_dump(mode="json", by_alias=True, exclude_none=True)
    data["descriptionText"] = from_rich_text(proposal.description)
    print(json.dumps(data, indent=2, default=str))


def _run_create(args: argparse.Namespace) -> None:
    """Run create command."""
    from proposal_enricher.errors import EnrichmentError

    service = _build_service(args)
    payload = _payload_from_args(args)
    try:
        proposal = service.create(payload)
    except EnrichmentError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    _print_proposal(proposal)


def _run_update(args: argparse.Namespace) -> None:
    """Run update command."""
    service = _build_service(args)
    payload = _payload_from_args(args)
    try:
        proposal = service.update(args.id, payload)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    _print_proposal(proposal)


def _run_show(args: argparse.Namespace) -> None:
    """Run show command."""
    from proposal_enricher.store import ProposalStore

    proposal = ProposalStore(args.db).get(args.id, populate_employee=args.populate)
    if proposal is None:
        print(f"Proposal not found: {args.id}", file=sys.stderr)
        raise SystemExit(1)
    _print_proposal(proposal)


def _run_employees(args: argparse.Namespace) -> None:
    """Run employees command."""
    from proposal_enricher.store import EmployeeStore

    employees = EmployeeStore(args.db).list_all()
    print(json.dumps([e.model_dump(mode="json") for e in employees], indent=2, default=str))


if __name__ == "__main__":
    main()
