"""Configuration, logging, security and other cross-cutting helpers."""
