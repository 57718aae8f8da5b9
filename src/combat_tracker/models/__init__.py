"""Data models for the combat tracker."""
