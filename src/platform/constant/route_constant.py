# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes
AUTH_BASE = f'{API_BASE}/auth'
AUTH_REGISTER = f'{AUTH_BASE}/register'
AUTH_LOGIN = f'{AUTH_BASE}/login'

# Flight routes
FLIGHT_BASE = f'{API_BASE}/flights'
FLIGHT_SEARCH = FLIGHT_BASE
FLIGHT_GET = f'{FLIGHT_BASE}/{{flight_id}}'

# Booking routes
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'

# Health routes
HEALTH = '/health'
PING = '/ping'
