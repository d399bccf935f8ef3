"""Application constants."""

from decimal import Decimal

# Progression: flat 2.5% overload over the all-time average logged weight
PROGRESSION_FACTOR = Decimal("1.025")
SUGGESTION_DECIMALS = 1

# Storage keys (one JSON document per key)
ACTIVE_PROGRAM_KEY = "savedProgram"
SAVED_PROGRAMS_KEY = "savedPrograms"
HISTORY_KEY = "workoutHistory"
SET_LOG_KEY = "setLog"

# History export
CSV_HEADER = "Date,Program,Day"

DEFAULT_PROGRAM_NAME = "My Program"

# Rest timer
REST_COMPLETE_MESSAGE = "Rest timer complete! Ready for your next set."

# Exercise picker
EXERCISE_SEARCH_LIMIT = 10

EXERCISE_LIBRARY: tuple[str, ...] = (
    "Bench Press",
    "Incline Press",
    "Decline Bench Press",
    "Close-Grip Bench Press",
    "Dumbbell Bench Press",
    "Incline Dumbbell Press",
    "Overhead Press",
    "Push Press",
    "Arnold Press",
    "Lateral Raise",
    "Rear Delt Fly",
    "Face Pull",
    "Barbell Row",
    "Pendlay Row",
    "Dumbbell Row",
    "Seated Cable Row",
    "T-Bar Row",
    "Pull-Up",
    "Chin-Up",
    "Lat Pulldown",
    "Straight-Arm Pulldown",
    "Dips",
    "Push-Up",
    "EZ Curls",
    "Barbell Curl",
    "Hammer Curl",
    "Preacher Curl",
    "Tricep Pushdown",
    "Skull Crushers",
    "Overhead Tricep Extension",
    "Back Squat",
    "Front Squat",
    "Goblet Squat",
    "Bulgarian Split Squat",
    "Walking Lunge",
    "Leg Press",
    "Hack Squat",
    "Leg Extension",
    "Leg Curl",
    "Deadlift",
    "Romanian Deadlift",
    "Sumo Deadlift",
    "Trap Bar Deadlift",
    "Hip Thrust",
    "Glute Bridge",
    "Good Morning",
    "Standing Calf Raise",
    "Seated Calf Raise",
    "Hanging Leg Raise",
    "Cable Crunch",
    "Ab Wheel Rollout",
    "Plank",
    "Side Plank",
    "Pallof Press",
    "Farmer's Carry",
    "Kettlebell Swing",
    "Box Jump",
    "Burpees",
    "Air Squats",
    "1 Mile Run",
    "400m Repeats",
    "Zone 2 walk/jog",
    "Rowing Intervals",
    "Assault Bike Sprints",
)
