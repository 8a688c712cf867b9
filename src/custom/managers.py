from django.contrib.auth.base_user import BaseUserManager


class CustomUserManager( BaseUserManager ):
    """
    Manager for CustomUser where the username is the login identifier and
    email is required and unique.
    """

    use_in_migrations = True

    def _create_user( self, username, email, password, **extra_fields ):
        username = ( username or '' ).strip()
        if not username:
            raise ValueError( 'The username must be set' )
        email = self.normalize_email( ( email or '' ).strip() )
        if not email:
            raise ValueError( 'The email must be set' )

        user = self.model( username = username, email = email, **extra_fields )
        user.set_password( password )
        user.save( using = self._db )
        return user

    def create_user( self, username, email, password = None, **extra_fields ):
        extra_fields.setdefault( 'is_staff', False )
        extra_fields.setdefault( 'is_superuser', False )
        return self._create_user( username, email, password, **extra_fields )

    def create_superuser( self, username, email, password = None, **extra_fields ):
        extra_fields.setdefault( 'is_staff', True )
        extra_fields.setdefault( 'is_superuser', True )

        if extra_fields.get( 'is_staff' ) is not True:
            raise ValueError( 'Superuser must have is_staff=True.' )
        if extra_fields.get( 'is_superuser' ) is not True:
            raise ValueError( 'Superuser must have is_superuser=True.' )

        return self._create_user( username, email, password, **extra_fields )

    def get_by_natural_key( self, username ):
        return self.get( username = username )
