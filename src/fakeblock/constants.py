from termcolor import colored


# Horizontal distance from the visualization origin within which markers are shown.
DISPLAY_ZONE_RADIUS = 75

# Distance between consecutive side markers along a boundary edge.
SIDE_MARKER_STEP = 10


ERROR_STYLE    = {"color": "red", "attrs": ["bold"]}
FILENAME_STYLE = {"color": "yellow"}
ERROR_PREFIX   = colored("Error: ", **ERROR_STYLE)
