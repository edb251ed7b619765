from app.models.station import Station
from app.models.program import Program, Weekday, WEEKDAYS
from app.models.document import RadioDocument
