from django.apps import AppConfig


class MembersConfig( AppConfig ):
    default_auto_field = "django.db.models.BigAutoField"
    name = "tc.apps.members"
