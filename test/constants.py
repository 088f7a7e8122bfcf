from typing import Any


DEFAULT_PASSWORD = 'P@ssw0rd'
TEST_EMAIL = 'traveller@example.com'
ANOTHER_EMAIL = 'another.traveller@example.com'

TEST_PASSENGER = {'name': 'Ada Lovelace', 'age': 36, 'document_id': 'P1234567'}
ANOTHER_PASSENGER = {'name': 'Charles Babbage', 'age': 79, 'document_id': 'P7654321'}

# Departures in UTC so date filters are unambiguous
SEED_FLIGHT_RECORDS: list[dict[str, Any]] = [
    {
        'airline': 'Garuda Indonesia',
        'airlineCode': 'GA',
        'flightNumber': 'GA402',
        'origin': 'CGK',
        'destination': 'DPS',
        'departure': '2025-12-01T06:00:00Z',
        'arrival': '2025-12-01T07:50:00Z',
        'duration': '1h 50m',
        'price': 150,
        'availableSeats': 10,
        'operationalDays': [1, 3, 5],
        'aircraft': 'Boeing 737-800',
    },
    {
        'airlineName': 'Lion Air',
        'carrierCode': 'JT',
        'flightNumber': 'JT34',
        'origin': 'CGK',
        'destination': 'DPS',
        'departure': '2025-12-01T09:00:00Z',
        'arrival': '2025-12-01T10:50:00Z',
        'price': 90.5,
        'availableSeats': 2,
        'operationalDays': '0,1,2,3,4,5,6',
    },
    {
        'airline': 'Citilink',
        'airlineCode': 'QG',
        'flightNumber': 'QG684',
        'origin': 'CGK',
        'destination': 'DPS',
        'departure': '2025-12-02T08:00:00Z',
        'price': 120,
        'availableSeats': 40,
        'operationalDays': [7, 2],
    },
    {
        'airline': 'Garuda Indonesia',
        'airlineCode': 'GA',
        'flightNumber': 'GA403',
        'origin': 'DPS',
        'destination': 'CGK',
        'departure': '2025-12-02T10:00:00Z',
        'price': 155,
        'availableSeats': 0,
    },
]
