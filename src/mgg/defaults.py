"""Built-in video shown before anything has been generated."""

from .models import VideoConfig

REDIS_LOCK_DATA = {
    "topic": "Redis Distributed Lock",
    "musicMood": "Techno / Cyberpunk",
    "width": 1080,
    "height": 1080,
    "fps": 30,
    "scenes": [
        {
            "type": "tech_diagram",
            "title": "Redis Distributed Lock",
            "subtitle": "SETNX Concurrency",
            "backgroundColor": "#0f172a",
            "textColor": "#e2e8f0",
            "durationInFrames": 240,
            "diagramConfig": {
                "nodes": [
                    {"id": "redis", "type": "database", "label": "Redis Master", "x": 50, "y": 50, "color": "#ef4444"},
                    {"id": "clientA", "type": "client", "label": "Client A", "x": 50, "y": 15, "color": "#3b82f6"},
                    {"id": "clientB", "type": "client", "label": "Client B", "x": 80, "y": 80, "color": "#a855f7"},
                    {"id": "clientC", "type": "client", "label": "Client C", "x": 20, "y": 80, "color": "#a855f7"},
                ],
                "edges": [
                    {"fromId": "clientA", "toId": "redis"},
                    {"fromId": "clientB", "toId": "redis"},
                    {"fromId": "clientC", "toId": "redis"},
                ],
                "actions": [
                    # Requests in flight
                    {"type": "packet", "startDelay": 30, "duration": 40, "fromId": "clientA", "toId": "redis", "label": "SETNX", "color": "#3b82f6"},
                    {"type": "packet", "startDelay": 35, "duration": 40, "fromId": "clientB", "toId": "redis", "label": "SETNX", "color": "#a855f7"},
                    {"type": "packet", "startDelay": 40, "duration": 40, "fromId": "clientC", "toId": "redis", "label": "SETNX", "color": "#a855f7"},
                    # Lock acquired
                    {"type": "highlight", "startDelay": 70, "duration": 20, "targetId": "redis", "color": "#ef4444"},
                    {"type": "show_label", "startDelay": 75, "duration": 100, "targetId": "redis", "label": "LOCKED", "color": "#ef4444"},
                    # Responses
                    {"type": "packet", "startDelay": 90, "duration": 30, "fromId": "redis", "toId": "clientA", "label": "OK", "color": "#10b981"},
                    {"type": "packet", "startDelay": 95, "duration": 30, "fromId": "redis", "toId": "clientB", "label": "FAIL", "color": "#ef4444"},
                    {"type": "packet", "startDelay": 100, "duration": 30, "fromId": "redis", "toId": "clientC", "label": "FAIL", "color": "#ef4444"},
                ],
            },
        }
    ],
}


def default_video() -> VideoConfig:
    """Return the Redis distributed lock demo configuration."""
    return VideoConfig.model_validate(REDIS_LOCK_DATA)
