"""
ISD backend
Registry service for sports clubs, their organizers, athletes and coaches
"""
