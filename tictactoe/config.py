# -----------------------------------------------------------------------------
# GAME CONSTANTS
# -----------------------------------------------------------------------------

BOARD_SIZE = 3                  # detection logic only handles 3x3
HUMAN_SYMBOL = 'O'              # human always plays circles
AI_SYMBOL = 'X'                 # ai always plays crosses
THINKING_DELAY_MS = 750         # pause before the ai answers

# outcome codes sent with the win notification
TIE = -1
HUMAN_WINS = 0
AI_WINS = 1

OUTCOME_MESSAGES = {
    TIE: "Tie",
    HUMAN_WINS: "Player wins",
    AI_WINS: "AI wins",
}

# -----------------------------------------------------------------------------
# UI COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_LINE_COLOR = "#555"
HUMAN_COLOR = "#8acaff"
AI_COLOR = "#ff8a8a"
