import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import serializers
from rolepermissions.checkers import has_role
from rolepermissions.exceptions import RoleDoesNotExist
from rolepermissions.roles import assign_role, remove_role

from arthings.legal.services import ConsentService

User = get_user_model()
logger = logging.getLogger(__name__)


class UserService:

    @staticmethod
    @transaction.atomic
    def register_user(validated_data, consents=None, ip_address=None, user_agent=None):
        """Create the account, its default role and any consents given at sign-up in one transaction."""
        password = validated_data.pop("password")
        user = User.objects.create_user(password=password, **validated_data)

        try:
            assign_role(user, "member")
        except RoleDoesNotExist:
            logger.error(f"Role member does not exist for {user.email}")
            raise serializers.ValidationError("Role member does not exist.")

        for consent in consents or []:
            ConsentService.record_consent(
                user,
                consent["document_type"],
                consent["document_version"],
                ip_address=ip_address,
                user_agent=user_agent,
            )

        logger.info(f"User registered: {user.email}")
        return user

    @staticmethod
    def update_profile(user, validated_data):
        for field in ("name", "phone", "city"):
            if field in validated_data:
                setattr(user, field, validated_data[field])
        user.save(update_fields=[f for f in ("name", "phone", "city") if f in validated_data])
        logger.info(f"Profile updated for {user.email}")
        return user

    @staticmethod
    def delete_account(user):
        email = user.email
        user.delete()
        logger.info(f"Account deleted: {email}")

    @staticmethod
    @transaction.atomic
    def set_admin(user, is_admin):
        if is_admin:
            assign_role(user, "admin")
        else:
            remove_role(user, "admin")
        logger.info(f"Admin role {'granted to' if is_admin else 'revoked from'} {user.email}")
        return user

    @staticmethod
    def toggle_admin(user):
        return UserService.set_admin(user, not has_role(user, "admin"))
