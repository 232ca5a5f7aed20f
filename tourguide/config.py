"""Configuration settings for Tour Guide."""

CONFIG = {
    "waypoint_radius": 10.0,  # distance units - follower has arrived at or within this
    "waypoint_separation": 25.0,  # distance units - minimum spacing between consecutive waypoints
    # Spoken announcements
    "speech_rate": 150,  # espeak words per minute
    "speech_timeout": 10,  # seconds
    # Scripted sessions
    "playback_interval": 0.0,  # seconds between commands during playback
}
