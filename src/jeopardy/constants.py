from jeopardy.components.team import Team

# Window
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Jeopardy"

# Turn order; the first team opens the game.
TEAM_ORDER = (Team.A, Team.B)
INITIAL_TEAM = TEAM_ORDER[0]

# Board layout (pixels)
BOARD_MARGIN = 16
CELL_GAP = 12
SCOREBOARD_HEIGHT = 88
SCOREBOARD_PANEL_WIDTH_PCT = 0.4

# Clue modal (pixels / fraction of window)
MODAL_MAX_WIDTH = 680
MODAL_MAX_HEIGHT = 380
MODAL_WIDTH_PCT = 0.8
MODAL_HEIGHT_PCT = 0.7
MODAL_PADDING = 24
MODAL_BUTTON_WIDTH = 150
MODAL_BUTTON_HEIGHT = 44
MODAL_BUTTON_GAP = 16

# Mouse buttons and keys (arcade values, kept here to avoid importing arcade)
MOUSE_BUTTON_LEFT = 1
KEY_ESCAPE = 65307

# Colors
BACKGROUND_COLOR = (18, 22, 40)
HEADER_COLOR = (29, 78, 216)
CELL_COLOR = (37, 99, 235)
ANSWERED_CELL_COLOR = (209, 213, 219)
CELL_TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 153)
MODAL_COLOR = (255, 255, 255)
MODAL_TEXT_COLOR = (17, 24, 39)
ANSWER_TEXT_COLOR = (37, 99, 235)
REVEAL_BUTTON_COLOR = (59, 130, 246)
CORRECT_BUTTON_COLOR = (34, 197, 94)
INCORRECT_BUTTON_COLOR = (239, 68, 68)
TEAM_COLORS = {
    Team.A: (59, 130, 246),
    Team.B: (34, 197, 94),
}
TEAM_HIGHLIGHT_COLORS = {
    Team.A: (219, 234, 254),
    Team.B: (220, 252, 231),
}

# Sound cues: cue name -> file inside the sounds directory
SOUND_FILES = {
    "select": "select.mp3",
    "correct": "correct.mp3",
    "wrong": "wrong.mp3",
}
