"""Hand-authored question hierarchy used by :class:`~cinepath.decision_tree.QuestionTree`.

Each internal entry carries a ``question`` together with ``yes`` and ``no``
branches; each leaf carries only ``tags``, the ordered catalogue genre
identifiers handed to the query builder.  Downstream queries depend on the
exact identifiers per leaf, so edit this table with care.
"""

from __future__ import annotations

from typing import Any, Dict

__all__ = ["TREE_DEFINITION"]

TREE_DEFINITION: Dict[str, Any] = {
    "question": "Are you in the mood for something energized and exciting?",
    "yes": {
        "question": "Do you want high-energy action",
        "yes": {
            "question": "Do you prefer superhero over fantasy action?",
            "yes": {
                "question": "Do you prefer sci-fi over magical fantasy?",
                "yes": {
                    "question": "Do you like dystopian futures?",
                    "yes": {
                        "question": "Should it be dark and serious?",
                        "yes": {
                            "question": "Do you prefer psychological themes?",
                            "yes": {
                                "question": "Should it be mind-bending?",
                                "yes": {
                                    "question": "Do you like philosophical questions?",
                                    "yes": {
                                        "question": "Should it have action sequences?",
                                        "yes": {"tags": [28, 878]},
                                        "no": {"tags": [878, 18]},
                                    },
                                    "no": {"tags": [28, 878]},
                                },
                                "no": {"tags": [53, 878]},
                            },
                            "no": {
                                "question": "Do you like survival themes?",
                                "yes": {
                                    "question": "Should it have adventure elements?",
                                    "yes": {"tags": [28, 12, 878]},
                                    "no": {"tags": [28, 878]},
                                },
                                "no": {"tags": [28, 878]},
                            },
                        },
                        "no": {
                            "question": "Do you like space exploration?",
                            "yes": {
                                "question": "Should it have humor?",
                                "yes": {
                                    "question": "Do you prefer adventure tone?",
                                    "yes": {"tags": [28, 12, 35, 878]},
                                    "no": {"tags": [35, 878]},
                                },
                                "no": {"tags": [28, 12, 878]},
                            },
                            "no": {
                                "question": "Do you like tech/cyberpunk aesthetics?",
                                "yes": {
                                    "question": "Should it be noir-style?",
                                    "yes": {"tags": [28, 80, 878]},
                                    "no": {"tags": [28, 878]},
                                },
                                "no": {"tags": [28, 878]},
                            },
                        },
                    },
                    "no": {
                        "question": "Should it be epic/grand scale?",
                        "yes": {
                            "question": "Do you like mythology and magical worlds?",
                            "yes": {
                                "question": "Should it have dark elements?",
                                "yes": {
                                    "question": "Do you like complex plots?",
                                    "yes": {"tags": [28, 14, 12]},
                                    "no": {"tags": [14, 12]},
                                },
                                "no": {"tags": [28, 14, 12]},
                            },
                            "no": {
                                "question": "Should it have romance elements?",
                                "yes": {
                                    "question": "Do you prefer happy endings?",
                                    "yes": {"tags": [14, 12, 10749]},
                                    "no": {"tags": [14, 12]},
                                },
                                "no": {"tags": [28, 14, 12]},
                            },
                        },
                        "no": {
                            "question": "Do you like adventure with humor?",
                            "yes": {
                                "question": "Should it be whimsical?",
                                "yes": {
                                    "question": "Do you like family-friendly content?",
                                    "yes": {"tags": [14, 12, 35, 10751]},
                                    "no": {"tags": [14, 12, 35]},
                                },
                                "no": {"tags": [28, 14, 12]},
                            },
                            "no": {"tags": [14, 12]},
                        },
                    },
                },
                "no": {
                    "question": "Do you like heist and crime stories?",
                    "yes": {
                        "question": "Should it have thriller elements?",
                        "yes": {
                            "question": "Do you like detective mysteries?",
                            "yes": {
                                "question": "Should it be dark and gritty?",
                                "yes": {
                                    "question": "Do you prefer psychological complexity?",
                                    "yes": {
                                        "question": "Should it be slow-burn?",
                                        "yes": {
                                            "question": "Do you like unreliable narrators?",
                                            "yes": {"tags": [28, 80, 53]},
                                            "no": {"tags": [28, 80, 18]},
                                        },
                                        "no": {
                                            "question": "Should it be high-stakes?",
                                            "yes": {"tags": [28, 80, 53]},
                                            "no": {"tags": [28, 80]},
                                        },
                                    },
                                    "no": {
                                        "question": "Should it have humor?",
                                        "yes": {"tags": [28, 35, 80]},
                                        "no": {"tags": [28, 80]},
                                    },
                                },
                                "no": {"tags": [28, 80]},
                            },
                            "no": {
                                "question": "Do you like elaborate plans?",
                                "yes": {
                                    "question": "Should it be comedic?",
                                    "yes": {
                                        "question": "Do you like witty dialogue?",
                                        "yes": {"tags": [28, 35, 80]},
                                        "no": {"tags": [28, 35]},
                                    },
                                    "no": {
                                        "question": "Should it be fast-paced?",
                                        "yes": {"tags": [28, 80]},
                                        "no": {"tags": [28, 80]},
                                    },
                                },
                                "no": {
                                    "question": "Do you prefer action-heavy?",
                                    "yes": {"tags": [28, 80]},
                                    "no": {"tags": [28]},
                                },
                            },
                        },
                        "no": {
                            "question": "Should it be international/exotic?",
                            "yes": {
                                "question": "Do you like treasure hunting?",
                                "yes": {
                                    "question": "Should it have historical elements?",
                                    "yes": {"tags": [12, 28, 36]},
                                    "no": {"tags": [12, 28]},
                                },
                                "no": {"tags": [12, 28]},
                            },
                            "no": {"tags": [28, 80]},
                        },
                    },
                    "no": {
                        "question": "Do you like martial arts and combat sports?",
                        "yes": {
                            "question": "Should it be historical?",
                            "yes": {
                                "question": "Do you prefer Eastern settings?",
                                "yes": {
                                    "question": "Should it be story-focused?",
                                    "yes": {
                                        "question": "Do you like philosophical themes?",
                                        "yes": {"tags": [28, 18, 36]},
                                        "no": {"tags": [28, 18]},
                                    },
                                    "no": {
                                        "question": "Should it be fast-paced?",
                                        "yes": {"tags": [28]},
                                        "no": {"tags": [28, 36]},
                                    },
                                },
                                "no": {
                                    "question": "Do you prefer modern?",
                                    "yes": {"tags": [28]},
                                    "no": {"tags": [28, 36]},
                                },
                            },
                            "no": {
                                "question": "Should it be competitive/tournament?",
                                "yes": {
                                    "question": "Do you like underdog stories?",
                                    "yes": {
                                        "question": "Should it be inspirational?",
                                        "yes": {"tags": [28, 18]},
                                        "no": {"tags": [28]},
                                    },
                                    "no": {
                                        "question": "Do you like revenge themes?",
                                        "yes": {"tags": [28, 18]},
                                        "no": {"tags": [28]},
                                    },
                                },
                                "no": {
                                    "question": "Do you prefer realistic?",
                                    "yes": {"tags": [28]},
                                    "no": {"tags": [28, 14]},
                                },
                            },
                        },
                        "no": {
                            "question": "Do you prefer exploration over combat?",
                            "yes": {
                                "question": "Should it be treasure hunting?",
                                "yes": {
                                    "question": "Do you prefer ancient mysteries?",
                                    "yes": {"tags": [12, 28, 36]},
                                    "no": {"tags": [12, 28]},
                                },
                                "no": {
                                    "question": "Do you like survival elements?",
                                    "yes": {"tags": [12, 28]},
                                    "no": {"tags": [12, 28]},
                                },
                            },
                            "no": {
                                "question": "Do you prefer military themes?",
                                "yes": {
                                    "question": "Should it be modern warfare?",
                                    "yes": {"tags": [28, 10752]},
                                    "no": {"tags": [28, 10752, 36]},
                                },
                                "no": {
                                    "question": "Do you like chase sequences?",
                                    "yes": {"tags": [28, 80]},
                                    "no": {"tags": [28, 80]},
                                },
                            },
                        },
                    },
                },
            },
            "no": {
                "question": "Do you want something fun and uplifting?",
                "yes": {
                    "question": "Do you prefer witty humor?",
                    "yes": {
                        "question": "Do you like romantic comedy?",
                        "yes": {
                            "question": "Should it be contemporary?",
                            "yes": {
                                "question": "Do you prefer a warm tone?",
                                "yes": {
                                    "question": "Should it have quirky characters?",
                                    "yes": {"tags": [35, 10749]},
                                    "no": {"tags": [35, 10749]},
                                },
                                "no": {"tags": [35, 10749]},
                            },
                            "no": {
                                "question": "Do you prefer a light tone?",
                                "yes": {"tags": [35, 10749, 36]},
                                "no": {"tags": [35, 10749]},
                            },
                        },
                        "no": {
                            "question": "Do you like satire?",
                            "yes": {
                                "question": "Do you prefer political and social satire?",
                                "yes": {
                                    "question": "Do you like dark comedy?",
                                    "yes": {"tags": [35]},
                                    "no": {"tags": [35]},
                                },
                                "no": {
                                    "question": "Do you like parody films?",
                                    "yes": {"tags": [35]},
                                    "no": {"tags": [35]},
                                },
                            },
                            "no": {
                                "question": "Should it be ensemble cast?",
                                "yes": {
                                    "question": "Do you prefer workplace comedy?",
                                    "yes": {"tags": [35]},
                                    "no": {"tags": [35]},
                                },
                                "no": {
                                    "question": "Do you like underdog stories?",
                                    "yes": {"tags": [35]},
                                    "no": {"tags": [35]},
                                },
                            },
                        },
                    },
                    "no": {
                        "question": "Do you want family-friendly content?",
                        "yes": {
                            "question": "Should it have fantasy or magical elements?",
                            "yes": {
                                "question": "Do you like animation?",
                                "yes": {
                                    "question": "Should it have adventure elements?",
                                    "yes": {"tags": [16, 35, 14, 10751]},
                                    "no": {"tags": [16, 35, 10751]},
                                },
                                "no": {"tags": [35, 14, 10751]},
                            },
                            "no": {
                                "question": "Do you like feel-good stories?",
                                "yes": {"tags": [35, 10751]},
                                "no": {"tags": [35]},
                            },
                        },
                        "no": {
                            "question": "Do you like action-comedy?",
                            "yes": {
                                "question": "Should it be heist-based?",
                                "yes": {"tags": [28, 35, 80]},
                                "no": {"tags": [28, 35]},
                            },
                            "no": {
                                "question": "Do you prefer quirky or crude humor?",
                                "yes": {
                                    "question": "Do you like dark comedy?",
                                    "yes": {"tags": [35]},
                                    "no": {"tags": [35]},
                                },
                                "no": {
                                    "question": "Do you prefer parody/spoof films?",
                                    "yes": {"tags": [35]},
                                    "no": {"tags": [35]},
                                },
                            },
                        },
                    },
                },
                "no": {
                    "question": "Do you like exploration and discovery?",
                    "yes": {
                        "question": "Should it have fantasy elements?",
                        "yes": {
                            "question": "Do you prefer magical elements?",
                            "yes": {"tags": [14, 12]},
                            "no": {"tags": [12, 14]},
                        },
                        "no": {
                            "question": "Do you prefer nature-focused themes?",
                            "yes": {
                                "question": "Do you like documentary style?",
                                "yes": {
                                    "question": "Should it be wildlife focused?",
                                    "yes": {"tags": [99, 12]},
                                    "no": {"tags": [12, 99]},
                                },
                                "no": {
                                    "question": "Do you prefer survival stories?",
                                    "yes": {"tags": [12, 53]},
                                    "no": {"tags": [12, 18]},
                                },
                            },
                            "no": {
                                "question": "Do you prefer ancient civilizations?",
                                "yes": {"tags": [12, 36]},
                                "no": {"tags": [12, 36, 18]},
                            },
                        },
                    },
                    "no": {
                        "question": "Do you want something musical?",
                        "yes": {
                            "question": "Do you prefer drama with music?",
                            "yes": {
                                "question": "Should it be biographical?",
                                "yes": {"tags": [10402, 18, 36]},
                                "no": {"tags": [10402, 18]},
                            },
                            "no": {
                                "question": "Do you like comedy musicals?",
                                "yes": {"tags": [10402, 35]},
                                "no": {"tags": [10402, 10749]},
                            },
                        },
                        "no": {
                            "question": "Do you prefer fantasy elements?",
                            "yes": {
                                "question": "Should it be magical?",
                                "yes": {"tags": [14, 12, 10751]},
                                "no": {"tags": [12, 14]},
                            },
                            "no": {
                                "question": "Do you prefer historical settings?",
                                "yes": {"tags": [12, 36]},
                                "no": {"tags": [12, 18]},
                            },
                        },
                    },
                },
            },
        },
        "no": {
            "question": "Do you prefer thriller content?",
            "yes": {
                "question": "Should it be psychological?",
                "yes": {
                    "question": "Do you like mystery elements?",
                    "yes": {
                        "question": "Should it be dark and intense?",
                        "yes": {
                            "question": "Do you prefer unreliable narrators?",
                            "yes": {
                                "question": "Should it be mind-bending?",
                                "yes": {
                                    "question": "Do you like philosophical themes?",
                                    "yes": {"tags": [53, 18]},
                                    "no": {"tags": [53]},
                                },
                                "no": {"tags": [53]},
                            },
                            "no": {
                                "question": "Do you like crime elements?",
                                "yes": {
                                    "question": "Should it be gritty?",
                                    "yes": {"tags": [53, 80]},
                                    "no": {"tags": [53, 80]},
                                },
                                "no": {"tags": [53]},
                            },
                        },
                        "no": {
                            "question": "Should it be witty?",
                            "yes": {
                                "question": "Do you like humor in thrillers?",
                                "yes": {"tags": [53, 35]},
                                "no": {"tags": [53]},
                            },
                            "no": {"tags": [53]},
                        },
                    },
                    "no": {
                        "question": "Do you like slow-burn tension?",
                        "yes": {
                            "question": "Should it have horror elements?",
                            "yes": {
                                "question": "Do you prefer supernatural?",
                                "yes": {
                                    "question": "Should it be atmospheric?",
                                    "yes": {"tags": [27, 53]},
                                    "no": {"tags": [53]},
                                },
                                "no": {"tags": [27, 53]},
                            },
                            "no": {
                                "question": "Do you like character development?",
                                "yes": {"tags": [53, 18]},
                                "no": {"tags": [53]},
                            },
                        },
                        "no": {
                            "question": "Should it have action?",
                            "yes": {
                                "question": "Do you prefer spy/espionage?",
                                "yes": {
                                    "question": "Should it be international?",
                                    "yes": {"tags": [53, 12]},
                                    "no": {"tags": [53]},
                                },
                                "no": {
                                    "question": "Do you like revenge plots?",
                                    "yes": {"tags": [53, 80]},
                                    "no": {"tags": [53]},
                                },
                            },
                            "no": {
                                "question": "Do you prefer cat-and-mouse plots?",
                                "yes": {
                                    "question": "Should it involve crime?",
                                    "yes": {"tags": [53, 80]},
                                    "no": {"tags": [53, 9648]},
                                },
                                "no": {"tags": [53]},
                            },
                        },
                    },
                },
                "no": {
                    "question": "Do you prefer spy stories?",
                    "yes": {
                        "question": "Should it be realistic?",
                        "yes": {
                            "question": "Do you like political themes?",
                            "yes": {
                                "question": "Should it be intense?",
                                "yes": {"tags": [53]},
                                "no": {"tags": [53, 18]},
                            },
                            "no": {"tags": [53]},
                        },
                        "no": {
                            "question": "Should it be humorous?",
                            "yes": {
                                "question": "Do you like ensemble casts?",
                                "yes": {"tags": [53, 35]},
                                "no": {"tags": [53, 35]},
                            },
                            "no": {"tags": [53]},
                        },
                    },
                    "no": {
                        "question": "Should it be organized crime?",
                        "yes": {
                            "question": "Do you like epic/saga stories?",
                            "yes": {
                                "question": "Should it be dark?",
                                "yes": {"tags": [53, 80, 18]},
                                "no": {"tags": [53, 80]},
                            },
                            "no": {"tags": [53, 80]},
                        },
                        "no": {
                            "question": "Should it be gritty?",
                            "yes": {
                                "question": "Do you like raw tension?",
                                "yes": {"tags": [53, 80]},
                                "no": {"tags": [53, 80]},
                            },
                            "no": {"tags": [53]},
                        },
                    },
                },
            },
            "no": {
                "question": "Do you like emotional stories?",
                "yes": {
                    "question": "Should it be inspirational?",
                    "yes": {
                        "question": "Do you prefer true stories?",
                        "yes": {
                            "question": "Should it be biographical?",
                            "yes": {
                                "question": "Do you like personal growth themes?",
                                "yes": {
                                    "question": "Should it be uplifting?",
                                    "yes": {"tags": [18, 36]},
                                    "no": {"tags": [18]},
                                },
                                "no": {"tags": [18, 36]},
                            },
                            "no": {
                                "question": "Should it be epic/grand?",
                                "yes": {"tags": [18, 36]},
                                "no": {"tags": [18]},
                            },
                        },
                        "no": {
                            "question": "Do you like overcoming adversity?",
                            "yes": {
                                "question": "Should it be feel-good?",
                                "yes": {"tags": [18, 12]},
                                "no": {"tags": [18]},
                            },
                            "no": {"tags": [18]},
                        },
                    },
                    "no": {
                        "question": "Do you like family relationships?",
                        "yes": {
                            "question": "Should it have generational themes?",
                            "yes": {
                                "question": "Do you prefer contemporary or historical?",
                                "yes": {"tags": [18]},
                                "no": {"tags": [18, 36]},
                            },
                            "no": {"tags": [18]},
                        },
                        "no": {
                            "question": "Do you like political themes?",
                            "yes": {
                                "question": "Should it be intense?",
                                "yes": {"tags": [18]},
                                "no": {"tags": [18, 35]},
                            },
                            "no": {"tags": [18]},
                        },
                    },
                },
                "no": {
                    "question": "Do you like romance as main focus?",
                    "yes": {
                        "question": "Should it be contemporary?",
                        "yes": {
                            "question": "Do you like comedy in romance?",
                            "yes": {
                                "question": "Should it be witty?",
                                "yes": {"tags": [35, 10749]},
                                "no": {"tags": [10749, 35]},
                            },
                            "no": {
                                "question": "Do you prefer happy endings?",
                                "yes": {"tags": [10749]},
                                "no": {"tags": [10749, 18]},
                            },
                        },
                        "no": {
                            "question": "Do you like historical settings?",
                            "yes": {
                                "question": "Should it be epic?",
                                "yes": {"tags": [10749, 36]},
                                "no": {"tags": [10749]},
                            },
                            "no": {
                                "question": "Do you like fantasy elements?",
                                "yes": {"tags": [10749, 14]},
                                "no": {"tags": [10749]},
                            },
                        },
                    },
                    "no": {"tags": [18]},
                },
            },
        },
    },
    "no": {
        "question": "Do you prefer something comforting?",
        "yes": {
            "question": "Do you prefer feel-good content?",
            "yes": {
                "question": "Do you prefer comedy?",
                "yes": {
                    "question": "Do you like comedy that makes you think?",
                    "yes": {
                        "question": "Do you prefer character-driven comedy?",
                        "yes": {"tags": [35, 18]},
                        "no": {"tags": [35]},
                    },
                    "no": {
                        "question": "Do you prefer slapstick or witty?",
                        "yes": {"tags": [16, 35, 10751]},
                        "no": {"tags": [35]},
                    },
                },
                "no": {
                    "question": "Should it be family-friendly?",
                    "yes": {
                        "question": "Do you like adventure elements?",
                        "yes": {"tags": [18, 12, 10751]},
                        "no": {"tags": [18, 10751]},
                    },
                    "no": {
                        "question": "Do you like romantic elements?",
                        "yes": {"tags": [18, 10749]},
                        "no": {"tags": [18]},
                    },
                },
            },
            "no": {
                "question": "Should it be historical?",
                "yes": {
                    "question": "Do you prefer drama over adventure?",
                    "yes": {
                        "question": "Should it be biographical?",
                        "yes": {"tags": [18, 36]},
                        "no": {"tags": [18, 36]},
                    },
                    "no": {
                        "question": "Should it have fantasy elements?",
                        "yes": {"tags": [12, 36, 14]},
                        "no": {"tags": [12, 36]},
                    },
                },
                "no": {
                    "question": "Do you like coming-of-age stories?",
                    "yes": {
                        "question": "Should it be teen-focused?",
                        "yes": {
                            "question": "Do you prefer humor?",
                            "yes": {"tags": [18, 35]},
                            "no": {"tags": [18]},
                        },
                        "no": {
                            "question": "Should it be emotionally heavy?",
                            "yes": {"tags": [18]},
                            "no": {"tags": [18, 10749]},
                        },
                    },
                    "no": {
                        "question": "Do you prefer romantic stories?",
                        "yes": {
                            "question": "Should it be lighthearted?",
                            "yes": {"tags": [10749, 35]},
                            "no": {"tags": [10749, 18]},
                        },
                        "no": {
                            "question": "Do you like heartwarming stories?",
                            "yes": {"tags": [18, 10751]},
                            "no": {"tags": [18]},
                        },
                    },
                },
            },
        },
        "no": {
            "question": "Do you like thought-provoking content?",
            "yes": {
                "question": "Do you prefer drama?",
                "yes": {
                    "question": "Do you like social issues?",
                    "yes": {
                        "question": "Should it be intense?",
                        "yes": {
                            "question": "Do you prefer political themes?",
                            "yes": {"tags": [18, 53]},
                            "no": {"tags": [18]},
                        },
                        "no": {
                            "question": "Should it have humor?",
                            "yes": {"tags": [18, 35]},
                            "no": {"tags": [18]},
                        },
                    },
                    "no": {
                        "question": "Do you prefer character-driven stories?",
                        "yes": {
                            "question": "Should it be introspective?",
                            "yes": {"tags": [18]},
                            "no": {"tags": [18, 10749]},
                        },
                        "no": {
                            "question": "Do you like ambiguous endings?",
                            "yes": {"tags": [18, 9648]},
                            "no": {"tags": [18]},
                        },
                    },
                },
                "no": {
                    "question": "Do you like hard sci-fi concepts?",
                    "yes": {
                        "question": "Should it be action-packed?",
                        "yes": {"tags": [28, 878]},
                        "no": {"tags": [878, 18]},
                    },
                    "no": {
                        "question": "Do you prefer character stories?",
                        "yes": {
                            "question": "Should it be emotional?",
                            "yes": {"tags": [878, 18]},
                            "no": {"tags": [878, 12]},
                        },
                        "no": {
                            "question": "Do you like alien themes?",
                            "yes": {"tags": [878, 53]},
                            "no": {"tags": [878, 9648]},
                        },
                    },
                },
            },
            "no": {
                "question": "Do you like mysteries?",
                "yes": {
                    "question": "Do you prefer thriller?",
                    "yes": {
                        "question": "Do you like psychological depth?",
                        "yes": {
                            "question": "Do you prefer dark themes?",
                            "yes": {"tags": [53, 80, 9648]},
                            "no": {"tags": [53, 9648]},
                        },
                        "no": {
                            "question": "Should it be fast-paced?",
                            "yes": {"tags": [53, 28]},
                            "no": {"tags": [53]},
                        },
                    },
                    "no": {
                        "question": "Should it be serious or witty?",
                        "yes": {"tags": [80, 53]},
                        "no": {"tags": [80, 35]},
                    },
                },
                "no": {
                    "question": "Do you like horror with substance?",
                    "yes": {
                        "question": "Do you prefer psychological horror?",
                        "yes": {
                            "question": "Should it be supernatural?",
                            "yes": {"tags": [27, 53, 14]},
                            "no": {"tags": [27, 53]},
                        },
                        "no": {
                            "question": "Do you like creature features?",
                            "yes": {"tags": [27, 878]},
                            "no": {"tags": [27, 18]},
                        },
                    },
                    "no": {
                        "question": "Do you prefer fantasy worlds?",
                        "yes": {
                            "question": "Should it be epic scale?",
                            "yes": {"tags": [14, 18, 12]},
                            "no": {"tags": [14, 18]},
                        },
                        "no": {
                            "question": "Do you like slice-of-life stories?",
                            "yes": {"tags": [18]},
                            "no": {
                                "question": "Should it be historically grounded?",
                                "yes": {"tags": [18, 36]},
                                "no": {"tags": [18, 9648]},
                            },
                        },
                    },
                },
            },
        },
    },
}
