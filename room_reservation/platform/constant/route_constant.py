# API Route Constants

# Base API
API_BASE = '/api'

# Reservation routes (controller paths are relative to this prefix)
RESERVATION_BASE = f'{API_BASE}/reservation'

# Health check
HEALTH = '/health'
