from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from arthings.users.services.user_service import UserService

User = get_user_model()


class Command(BaseCommand):
    help = "Grant the admin role to a user by email (defaults to the ADMIN_EMAIL setting)"

    def add_arguments(self, parser):
        parser.add_argument("--email", help="Email of the user to promote")

    def handle(self, *args, **options):
        email = options.get("email") or settings.ADMIN_EMAIL
        if not email:
            raise CommandError("Pass --email or set ADMIN_EMAIL first.")

        try:
            user = User.objects.get(email__iexact=email.strip())
        except User.DoesNotExist:
            raise CommandError(f"No user found with email: {email}")

        UserService.set_admin(user, True)
        self.stdout.write(self.style.SUCCESS(f"{user.name} ({user.email}) is now an admin"))
