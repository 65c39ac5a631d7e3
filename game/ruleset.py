# Configuration: colors, code length, partitions, referee limits, etc.
DEFAULT_RULES = {
    "name": "osue-8x5",  # Identifier for this ruleset
    "code_length": 5,  # Number of slots in the code
    "num_colors": 8,  # Available colors (see color set below)
    "color_width": 3,  # Bits per color on the wire
    "max_attempts": 35,  # Guesses the referee accepts before the game is lost
    "colors": [
        "beige",
        "darkblue",
        "green",
        "orange",
        "red",
        "black",
        "violet",
        "white",
    ],
    # Uniform probes used by the partition analysis: four colors over five
    # slots, the first color of each partition duplicated.
    "partitions": [
        [0, 0, 1, 2, 3],
        [4, 4, 5, 6, 7],
    ],
    "display": {
        "letter_map": {  # For CLI rendering and transcripts
            "beige": "e",
            "darkblue": "d",
            "green": "g",
            "orange": "o",
            "red": "r",
            "black": "b",
            "violet": "v",
            "white": "w",
        }
    },
}
