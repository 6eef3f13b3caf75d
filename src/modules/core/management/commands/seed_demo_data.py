from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from modules.core.conf import EngineSettings
from modules.core.storage.django_store import DjangoRecordStore
from modules.identity.constants import ActorRole
from modules.identity.dtos import Actor
from modules.sessions.services import ActorSession


class Command(BaseCommand):
    help = "Write the demo order dataset for one actor into the record store."

    def add_arguments(self, parser):
        parser.add_argument("--role", choices=ActorRole.values, default=ActorRole.CUSTOMER)
        parser.add_argument("--actor-id", required=True)
        parser.add_argument("--email", default=None)
        parser.add_argument("--name", default=None)
        parser.add_argument("--college", default=None)

    def handle(self, *args, **options):
        try:
            actor = Actor(
                id=options["actor_id"],
                role=options["role"],
                email=options["email"],
                name=options["name"],
                college=options["college"],
            )
        except ValueError as exc:
            raise CommandError(str(exc)) from exc

        settings = EngineSettings.from_django().model_copy(update={"seed_demo_data": True})
        session = ActorSession(actor, DjangoRecordStore(), settings=settings).start()

        if not session.orders.seeded:
            self.stdout.write(
                self.style.WARNING(
                    f"{session.scope.orders} already holds orders; nothing seeded."
                )
            )
            return

        order_count = sum(1 for _ in session.orders.list_orders())
        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: {session.scope.orders} orders={order_count}")
        )
