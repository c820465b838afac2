from rolepermissions.roles import AbstractUserRole


class Admin(AbstractUserRole):
    available_permissions = {
        "view_admin_dashboard": True,
        "manage_users": True,
        "manage_listings": True,
        "manage_rentals": True,
    }


class Member(AbstractUserRole):
    """Every registered account; its rights come from ownership checks, not role permissions."""
    available_permissions = {}
