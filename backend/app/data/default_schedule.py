"""
Default stations and weekly program grid, used to seed a fresh data file.
Every station carries the same national grid: weekdays, Saturday, Sunday.
"""
from app.models.document import RadioDocument
from app.models.program import Program, Weekday
from app.models.station import Station

DEFAULT_STATIONS = [
    Station(
        id="lima",
        name="Lima",
        url="https://radios-player-exitosa.mediaserver.digital/exitosa.chiclayo",
        image="/images/stations/1752245607379-f9si3p.jpg",
        frequency="95.5 FM",
        city="Lima, Perú",
        description="La estación principal de Radio Exitosa en la capital del Perú",
    ),
    Station(
        id="arequipa",
        name="Arequipa",
        url="https://neptuno-3-audio.mediaserver.digital/e_arequipa",
        image="/images/stations/1752245619584-g4ffj.jpg",
        frequency="104.9 FM",
        city="Arequipa, Perú",
        description="Transmitiendo desde la Ciudad Blanca",
    ),
    Station(
        id="trujillo",
        name="Trujillo",
        url="https://radios-player-exitosa.mediaserver.digital/exitosa.trujillo",
        image="/images/stations/1752245627866-a2gt25.jpg",
        frequency="103.3 FM",
        city="Trujillo, Perú",
        description="La voz de la Ciudad de la Eterna Primavera",
    ),
    Station(
        id="chiclayo",
        name="Chiclayo",
        url="https://radios-player-exitosa.mediaserver.digital/exitosa.chiclayo",
        image="/images/stations/1752245634342-tow063.jpg",
        frequency="98.9 FM",
        city="Chiclayo, Perú",
        description="Conectando con el norte del Perú",
    ),
]

# (name, host, start, end)
WEEKDAY_PROGRAMS = [
    ("La Hora Esotérica", "Soralla De Los Angeles", "00:00", "01:00"),
    ("Usted Tiene Derecho", "Mario Camacho Perla", "01:00", "02:00"),
    ("La Voz De Los Pueblos", "Jack Miranda y Marcial De La Cruz", "02:00", "05:00"),
    ("Exitosa Perú", "Pedro Paredes", "05:00", "08:00"),
    ("Hablemos Claro", "Nicolás Lúcar", "08:00", "11:00"),
    ("Exitosa Te Escucha", "Katyusca Torres Aybar", "11:00", "14:00"),
    ("Exitosa Deportes", "Gonzalo Núñez, Óscar Paz y Jean Rodríguez", "14:00", "16:00"),
    ("Contra El Tráfico", "Ricardo Rondón", "16:00", "18:00"),
    ("Médicos En Acción", "Armando Massé", "18:00", "19:00"),
    ("Informamos y Opinamos", "Karina Novoa", "19:00", "22:00"),
    ("Exitosa Noticias", "Juriko Novoa", "22:00", "23:00"),
    ("Despierta Tus Emociones", "José Poicón", "23:00", "00:00"),
]

SATURDAY_PROGRAMS = [
    ("La Hora Esotérica", "Esotéricos", "00:00", "01:00"),
    ("Educando Mis Emociones", "Dra. Danila Villegas", "01:00", "02:00"),
    ("La Voz De Los Pueblos", "Jack Miranda", "02:00", "05:00"),
    ("Exitosa Perú", "Pedro Paredes", "05:00", "08:00"),
    ("Hablemos Claro", "Jesús Verde", "08:00", "11:00"),
    ("Construyendo Cimientos Para El Futuro", "Jose Cieza", "11:00", "12:00"),
    ("Derrama Magisterial", "Carlos Cornejo", "12:00", "13:00"),
    ("Exitosa Deportes", "Óscar Paz", "13:00", "15:00"),
    ("Exitosa Sábado", "Katyusca Torres Aybar", "15:00", "18:00"),
    ("La Hora Del Volante", "Tito Alvites", "18:00", "20:00"),
    ("Exitosa Te Escucha", "Jorge Valdez", "20:00", "22:00"),
    ("Noche Esotérica", "Vidente Hayimy", "22:00", "00:00"),
]

SUNDAY_PROGRAMS = [
    ("Noche Esotérica", "Vidente Hayimy", "00:00", "01:00"),
    ("La Voz de los Pueblos", "Hierbero", "01:00", "02:00"),
    ("La Voz de los Pueblos", "Marcial de la Cruz", "02:00", "06:00"),
    ("Exitosa Perú", "Piura", "06:00", "07:00"),
    ("Exitosa Perú", "Cusco", "07:00", "08:00"),
    ("Exitosa Perú", "Arequipa", "08:00", "09:00"),
    ("Exitosa Perú", "Trujillo", "09:00", "10:00"),
    ("En Defensa de la Verdad", "Cecilia García", "10:00", "12:00"),
    ("Exitosa Perú", "Chiclayo", "12:00", "13:00"),
    ("Exitosa Perú", "Huancayo", "13:00", "14:00"),
    ("Exitosa Perú", "Huacho", "14:00", "15:00"),
    ("Exitosa Perú", "Ica", "15:00", "16:00"),
    ("Exitosa Perú", "Iquitos", "16:00", "17:00"),
    ("Exitosa Perú", "Tacna", "17:00", "18:00"),
    ("Exitosa Perú", "Tarapoto", "18:00", "19:00"),
    ("Médicos en Acción", "Daniel Bueno", "19:00", "21:00"),
    ("Exitosa Deportes", "Óscar Paz", "21:00", "22:00"),
    ("Noche Esotérica", "Vidente Hayimy", "22:00", "00:00"),
]

WEEKLY_GRID = [
    (WEEKDAY_PROGRAMS, [Weekday.LUNES, Weekday.MARTES, Weekday.MIERCOLES, Weekday.JUEVES, Weekday.VIERNES]),
    (SATURDAY_PROGRAMS, [Weekday.SABADO]),
    (SUNDAY_PROGRAMS, [Weekday.DOMINGO]),
]


def build_default_document() -> RadioDocument:
    """All default stations, each with the full weekly grid. Program ids are sequential."""
    programs = []
    next_id = 1
    for station in DEFAULT_STATIONS:
        for grid, days in WEEKLY_GRID:
            for name, host, start, end in grid:
                programs.append(Program(
                    id=str(next_id),
                    station_id=station.id,
                    name=name,
                    host=host,
                    start_time=start,
                    end_time=end,
                    days=list(days),
                ))
                next_id += 1
    stations = [station.model_copy() for station in DEFAULT_STATIONS]
    return RadioDocument(stations=stations, programs=programs)
