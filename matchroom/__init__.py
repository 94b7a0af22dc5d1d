"""
Matchroom - matchmaking service

Responsibilities:
- Random pairing of room participants into matches (pairs, a trailing
  triple, or a bye)
- Backend configuration for the match room web client
"""
