"""Configuration and path management for tagdirs."""
