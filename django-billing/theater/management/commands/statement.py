"""Print billing statements for invoices stored as JSON files.

Usage: python manage.py statement invoices.json plays.json [--format json]
"""

import json
import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import ValidationError

from theater.domain import DomainError
from theater.handlers import StatementSerializer, load_invoice, load_plays
from theater.services import StatementService
from theater.stores import InMemoryPlayStore

logger = logging.getLogger(__name__)


def _read_json(path: str):
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise CommandError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CommandError(f"Invalid JSON in {path}: {exc}") from exc


class Command(BaseCommand):
    help = "Render billing statements for one invoice or a list of invoices."

    def add_arguments(self, parser):
        parser.add_argument("invoices", help="Path to an invoice or list of invoices (JSON)")
        parser.add_argument("plays", help="Path to the plays catalog keyed by play id (JSON)")
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)",
        )

    def handle(self, *args, **options):
        raw_invoices = _read_json(options["invoices"])
        raw_plays = _read_json(options["plays"])
        if isinstance(raw_invoices, dict):
            raw_invoices = [raw_invoices]
        elif not isinstance(raw_invoices, list):
            raise CommandError(
                "Invalid input: invoices must be an object or a list of objects"
            )

        try:
            service = StatementService(InMemoryPlayStore(load_plays(raw_plays)))
            statements = [
                service.build_statement(load_invoice(raw)) for raw in raw_invoices
            ]
        except ValidationError as exc:
            raise CommandError(f"Invalid input: {exc.detail}") from exc
        except DomainError as exc:
            raise CommandError(str(exc)) from exc

        if options["format"] == "json":
            data = StatementSerializer(
                statements,
                many=True,
                context={"format_amount": service.format_amount},
            ).data
            self.stdout.write(json.dumps(data, indent=2))
        else:
            for statement in statements:
                self.stdout.write(service.render_text(statement), ending="")

        logger.info("Rendered %d statement(s)", len(statements))
