"""Navigation core: views, tabs, dispatcher and render snapshots."""
