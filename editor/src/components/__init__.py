"""UI components for RunSnap

This package contains the interactive parts of the editor:
- story_canvas.py: StoryCanvas widget (preview + gesture input)
- transform_widgets: gesture inputs and the TransformController state machine
"""
