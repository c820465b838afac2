from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin
from rolepermissions.roles import get_user_roles

from .forms import UserAdminChangeForm, UserAdminCreationForm
from .services.user_service import UserService

User = get_user_model()


@admin.register(User)
class CustomUserAdmin(UserAdmin):
    form = UserAdminChangeForm
    add_form = UserAdminCreationForm
    ordering = ("-created_at",)
    list_display = ("email", "name", "city", "is_verified", "is_active", "get_roles", "created_at")
    search_fields = ("email", "name")
    list_filter = ("is_verified", "is_active", "is_staff")
    readonly_fields = ("created_at", "last_login")
    actions = ["grant_admin_role", "revoke_admin_role"]

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Personal Info", {"fields": ("name", "phone", "city", "is_verified")}),
        ("Permissions", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Dates", {"fields": ("last_login", "created_at")}),
    )
    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "password1", "password2", "name", "is_active", "is_staff"),
        }),
    )
    filter_horizontal = ()

    def get_roles(self, obj):
        return ", ".join([role.get_name() for role in get_user_roles(obj)])

    get_roles.short_description = "Roles"

    def grant_admin_role(self, request, queryset):
        for user in queryset:
            UserService.set_admin(user, True)
        self.message_user(request, f"Granted admin role to {queryset.count()} user(s).")

    grant_admin_role.short_description = "Grant admin role"

    def revoke_admin_role(self, request, queryset):
        for user in queryset.exclude(pk=request.user.pk):
            UserService.set_admin(user, False)
        self.message_user(request, "Revoked admin role from the selected users (except yourself).")

    revoke_admin_role.short_description = "Revoke admin role"
