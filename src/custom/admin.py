from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.db.models import Count

from .forms import CustomUserChangeForm, CustomUserCreationForm
from .models import CustomUser


@admin.register( CustomUser )
class CustomUserAdmin( UserAdmin ):

    model = CustomUser
    form = CustomUserChangeForm
    add_form = CustomUserCreationForm

    add_fieldsets = (
        ( None, {
            'classes': ( 'wide', ),
            'fields': ( 'username', 'email', 'name', 'password1', 'password2' ),
        }),
    )
    fieldsets = (
        ( None, { 'fields': ( 'username', 'password' ) } ),
        ( 'Profile', { 'fields': ( 'name', 'email' ) } ),
        ( 'Access', { 'fields': ( 'is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions' ) } ),
        ( 'Activity', { 'fields': ( 'last_login', 'date_joined' ) } ),
    )

    list_display = ( 'username', 'email', 'name', 'owned_trip_count', 'shared_trip_count', 'is_staff' )
    list_filter = ( 'is_staff', 'is_active' )
    search_fields = ( 'username', 'email', 'name' )
    ordering = ( 'id', )

    def get_queryset( self, request ):
        return super().get_queryset( request ).annotate(
            owned_count = Count( 'owned_trips', distinct = True ),
            shared_count = Count( 'trip_memberships', distinct = True ),
        )

    @admin.display( description = 'Owns', ordering = 'owned_count' )
    def owned_trip_count( self, obj ):
        return obj.owned_count

    @admin.display( description = 'Member of', ordering = 'shared_count' )
    def shared_trip_count( self, obj ):
        return obj.shared_count
