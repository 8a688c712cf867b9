from dataclasses import dataclass
from typing import Any, Dict

from tc.apps.api.constants import APIFields as F


@dataclass
class WeatherData:
    """ Current conditions, or one day of a forecast. """

    temperature     : int
    condition       : str
    location        : str
    date            : str
    icon            : str
    is_placeholder  : bool  = False

    def to_dict(self) -> Dict[ str, Any ]:
        return {
            F.TEMPERATURE: self.temperature,
            F.CONDITION: self.condition,
            F.LOCATION: self.location,
            F.DATE: self.date,
            F.ICON: self.icon,
            F.IS_PLACEHOLDER: self.is_placeholder,
        }

    @classmethod
    def from_dict( cls, data : Dict[ str, Any ] ) -> 'WeatherData':
        return cls(
            temperature = data[F.TEMPERATURE],
            condition = data[F.CONDITION],
            location = data[F.LOCATION],
            date = data[F.DATE],
            icon = data[F.ICON],
            is_placeholder = bool( data.get( F.IS_PLACEHOLDER, False )),
        )
