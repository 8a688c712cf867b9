from django.urls import reverse
from django.utils.html import format_html


def admin_change_url( obj ) -> str:
    meta = obj._meta
    return reverse( f'admin:{meta.app_label}_{meta.model_name}_change', args = ( obj.pk, ))


def admin_link( attribute_name : str, short_description : str, empty_value : str = '-' ):
    """
    Decorates a ModelAdmin method that labels a related object, turning
    its output into a link to that object's change page.
    """
    def decorator( label_func ):
        def link_column( self, obj ):
            related_obj = getattr( obj, attribute_name )
            if related_obj is None:
                return empty_value
            return format_html(
                '<a href="{}">{}</a>',
                admin_change_url( related_obj ),
                label_func( self, related_obj ),
            )
        link_column.short_description = short_description
        return link_column
    return decorator
