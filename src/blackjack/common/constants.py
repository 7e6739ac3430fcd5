# src/blackjack/common/constants.py

# Scoring
BLACKJACK = 21
ACE_POINTS = 11
FACE_POINTS = 10
SOFT_ACE_BONUS = ACE_POINTS - 1  # what an Ace gives back when counted as 1

# Dealer stands on any score >= this (soft or hard, bust included)
DEALER_STAND_ON = 17

# Cards dealt to each participant before the player's turn
INITIAL_CARDS = 2

# Player decisions (compared after strip().lower())
DECISION_HIT = "h"
DECISION_STAY = "s"
VALID_DECISIONS = {DECISION_HIT, DECISION_STAY}

PROMPT = "(h)it or (s)tay? "
