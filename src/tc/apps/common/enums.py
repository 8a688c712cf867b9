from enum import Enum


class LabeledEnum(Enum):
    """
    Enum whose members carry a label for display.  Values are assigned in
    declaration order; members are stored and serialized by lowercase name.
    """

    def __new__( cls, *args ):
        obj = object.__new__( cls )
        obj._value_ = len( cls.__members__ ) + 1
        return obj

    def __init__( self, label : str, description : str ):
        self.label = label
        self.description = description
        return

    def __str__(self):
        return self.name.lower()

    @classmethod
    def choices(cls):
        return [ ( str( member ), member.label ) for member in cls ]

    @classmethod
    def default(cls):
        return next( iter( cls ))

    @classmethod
    def from_name( cls, name : str ):
        normalized = ( name or '' ).strip().lower()
        for member in cls:
            if str( member ) == normalized:
                return member
            continue
        raise ValueError( f'Unknown name "{name}" for {cls.__name__}' )

    @classmethod
    def from_name_safe( cls, name : str ):
        try:
            return cls.from_name( name )
        except ValueError:
            return cls.default()
