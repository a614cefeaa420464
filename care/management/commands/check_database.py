from django.core.management.base import BaseCommand, CommandError

from care.services.dbhealth import DatabaseHealthMonitor


class Command(BaseCommand):
    help = "Run one database connectivity check (SELECT 1)."

    def handle(self, *args, **opts):
        if not DatabaseHealthMonitor().check_once():
            raise CommandError("database check failed")
        self.stdout.write(self.style.SUCCESS("database ok"))
