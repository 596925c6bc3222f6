"""Generate a new TypeScript Chrome extension project from the bundled template."""
