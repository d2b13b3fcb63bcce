"""
Built-in calisthenics exercise library and the public system templates.

Library entries are referenced by slug; template exercises point at those slugs
and are resolved to library ids when the seed runs.
"""

INITIAL_EXERCISES = [
    # Push
    {
        "name": "Push-up",
        "slug": "push-up",
        "category": "push",
        "difficulty": "beginner",
        "short_description": "The foundational horizontal pushing movement.",
        "long_description": "Start in a high plank with hands under shoulders. Lower the chest to the floor "
                            "with elbows at roughly 45 degrees, then press back to full lockout.",
        "muscles_primary": ["chest", "triceps"],
        "muscles_secondary": ["front delts", "core"],
        "equipment": [],
        "progressions": ["Diamond Push-up", "Archer Push-up"],
        "regressions": ["Incline Push-up", "Knee Push-up"],
        "tips": ["Keep a straight line from head to heels", "Touch the floor with the chest, not the hips"],
    },
    {
        "name": "Diamond Push-up",
        "slug": "diamond-push-up",
        "category": "push",
        "difficulty": "beginner",
        "short_description": "Close-grip push-up that shifts load onto the triceps.",
        "long_description": "Place the hands together under the sternum so thumbs and index fingers form "
                            "a diamond. Lower under control and press back up keeping elbows tucked.",
        "muscles_primary": ["triceps", "chest"],
        "muscles_secondary": ["front delts"],
        "equipment": [],
        "progressions": ["Archer Push-up"],
        "regressions": ["Push-up"],
        "tips": ["Elbows stay close to the ribs"],
    },
    {
        "name": "Pike Push-up",
        "slug": "pike-push-up",
        "category": "push",
        "difficulty": "beginner",
        "short_description": "Vertical pushing pattern that builds towards the handstand push-up.",
        "long_description": "From a downward-dog position with hips high, bend the elbows to bring the "
                            "head towards the floor in front of the hands, then press back up.",
        "muscles_primary": ["shoulders"],
        "muscles_secondary": ["triceps", "upper chest"],
        "equipment": [],
        "progressions": ["Elevated Pike Push-up", "Handstand Push-up"],
        "regressions": ["Push-up"],
        "tips": ["Keep the hips stacked over the shoulders"],
    },
    {
        "name": "Dip",
        "slug": "dip",
        "category": "push",
        "difficulty": "intermediate",
        "short_description": "Parallel bar dip for chest, triceps and shoulders.",
        "long_description": "Support yourself on parallel bars with locked arms. Lower until the upper "
                            "arms are parallel to the floor, then press back to lockout.",
        "muscles_primary": ["chest", "triceps"],
        "muscles_secondary": ["front delts"],
        "equipment": ["parallel bars"],
        "progressions": ["Ring Dip", "Weighted Dip"],
        "regressions": ["Bench Dip"],
        "tips": ["Depress the shoulders at the top", "Lean forward slightly for more chest"],
    },
    {
        "name": "Archer Push-up",
        "slug": "archer-push-up",
        "category": "push",
        "difficulty": "advanced",
        "short_description": "Unilateral push-up variation on the path to the one-arm push-up.",
        "long_description": "Take a very wide hand position. Lower towards one hand while the opposite "
                            "arm stays straight, then press back to the centre.",
        "muscles_primary": ["chest", "triceps"],
        "muscles_secondary": ["shoulders", "core"],
        "equipment": [],
        "progressions": ["One-arm Push-up"],
        "regressions": ["Diamond Push-up"],
        "tips": ["Keep the straight arm locked"],
    },
    # Pull
    {
        "name": "Ring Row",
        "slug": "ring-row",
        "category": "pull",
        "difficulty": "beginner",
        "short_description": "Inverted row on rings or a low bar.",
        "long_description": "Hang under rings with a rigid body and heels on the floor. Pull the chest to "
                            "the hands while squeezing the shoulder blades together.",
        "muscles_primary": ["upper back", "lats"],
        "muscles_secondary": ["biceps", "rear delts"],
        "equipment": ["rings"],
        "progressions": ["Chin-up", "Pull-up"],
        "regressions": ["Elevated Ring Row"],
        "tips": ["Retract the scapula before bending the arms"],
    },
    {
        "name": "Dead Hang",
        "slug": "dead-hang",
        "category": "pull",
        "difficulty": "beginner",
        "short_description": "Passive bar hang for grip and shoulder health.",
        "long_description": "Hang from a bar with straight arms and relaxed shoulders for time.",
        "muscles_primary": ["forearms"],
        "muscles_secondary": ["lats", "shoulders"],
        "equipment": ["pull-up bar"],
        "progressions": ["Active Hang", "Pull-up"],
        "regressions": [],
        "tips": ["Breathe and stay relaxed"],
    },
    {
        "name": "Chin-up",
        "slug": "chin-up",
        "category": "pull",
        "difficulty": "beginner",
        "short_description": "Supinated-grip vertical pull, usually easier than a pull-up.",
        "long_description": "Hang with palms facing you, shoulder-width apart. Pull until the chin clears "
                            "the bar and lower to full extension.",
        "muscles_primary": ["lats", "biceps"],
        "muscles_secondary": ["upper back"],
        "equipment": ["pull-up bar"],
        "progressions": ["Pull-up"],
        "regressions": ["Negative Chin-up", "Ring Row"],
        "tips": ["Start every rep from a full hang"],
    },
    {
        "name": "Pull-up",
        "slug": "pull-up",
        "category": "pull",
        "difficulty": "intermediate",
        "short_description": "Pronated-grip vertical pull.",
        "long_description": "Hang with palms facing away, slightly wider than shoulders. Pull the chest "
                            "towards the bar and lower with control.",
        "muscles_primary": ["lats"],
        "muscles_secondary": ["biceps", "upper back", "core"],
        "equipment": ["pull-up bar"],
        "progressions": ["Archer Pull-up", "Muscle-up"],
        "regressions": ["Chin-up", "Negative Pull-up"],
        "tips": ["Drive the elbows down towards the hips"],
    },
    {
        "name": "Tuck Front Lever",
        "slug": "tuck-front-lever",
        "category": "pull",
        "difficulty": "advanced",
        "short_description": "Horizontal hold with knees tucked, first front lever stage.",
        "long_description": "From a hang, pull the body horizontal with straight arms and knees tucked "
                            "to the chest. Hold with the back parallel to the floor.",
        "muscles_primary": ["lats", "core"],
        "muscles_secondary": ["rear delts", "forearms"],
        "equipment": ["pull-up bar"],
        "progressions": ["Advanced Tuck Front Lever", "Straddle Front Lever"],
        "regressions": ["Dragon Flag"],
        "tips": ["Push the bar towards the hips with straight arms"],
    },
    {
        "name": "Muscle-up",
        "slug": "muscle-up",
        "category": "skill",
        "difficulty": "advanced",
        "short_description": "Explosive pull transitioning into a dip above the bar.",
        "long_description": "Generate a powerful high pull, transition the wrists over the bar and press "
                            "out of the bottom of a straight bar dip.",
        "muscles_primary": ["lats", "chest", "triceps"],
        "muscles_secondary": ["core", "forearms"],
        "equipment": ["pull-up bar"],
        "progressions": ["Ring Muscle-up"],
        "regressions": ["Explosive Pull-up", "Straight Bar Dip"],
        "tips": ["Pull to the lower chest before transitioning"],
    },
    # Legs
    {
        "name": "Squat",
        "slug": "squat",
        "category": "legs",
        "difficulty": "beginner",
        "short_description": "Bodyweight squat to full depth.",
        "long_description": "Stand with feet shoulder-width apart, sit the hips back and down until the "
                            "thighs pass parallel, then drive back up.",
        "muscles_primary": ["quads", "glutes"],
        "muscles_secondary": ["hamstrings", "core"],
        "equipment": [],
        "progressions": ["Bulgarian Split Squat", "Pistol Squat"],
        "regressions": ["Box Squat"],
        "tips": ["Knees track over the toes"],
    },
    {
        "name": "Lunge",
        "slug": "lunge",
        "category": "legs",
        "difficulty": "beginner",
        "short_description": "Alternating forward lunge.",
        "long_description": "Step forward and lower the back knee towards the floor, then push through "
                            "the front heel to return.",
        "muscles_primary": ["quads", "glutes"],
        "muscles_secondary": ["hamstrings", "calves"],
        "equipment": [],
        "progressions": ["Bulgarian Split Squat"],
        "regressions": ["Split Squat"],
        "tips": ["Keep the torso upright"],
    },
    {
        "name": "Glute Bridge",
        "slug": "glute-bridge",
        "category": "legs",
        "difficulty": "beginner",
        "short_description": "Hip extension from the floor.",
        "long_description": "Lie on your back with knees bent. Drive through the heels to lift the hips "
                            "until the body is straight from knees to shoulders.",
        "muscles_primary": ["glutes"],
        "muscles_secondary": ["hamstrings", "lower back"],
        "equipment": [],
        "progressions": ["Single-leg Glute Bridge"],
        "regressions": [],
        "tips": ["Squeeze the glutes at the top"],
    },
    {
        "name": "Bulgarian Split Squat",
        "slug": "bulgarian-split-squat",
        "category": "legs",
        "difficulty": "intermediate",
        "short_description": "Rear-foot elevated split squat.",
        "long_description": "Place the back foot on a bench and lower the back knee towards the floor, "
                            "keeping most of the weight on the front leg.",
        "muscles_primary": ["quads", "glutes"],
        "muscles_secondary": ["adductors"],
        "equipment": ["bench"],
        "progressions": ["Pistol Squat"],
        "regressions": ["Lunge"],
        "tips": ["Front shin stays roughly vertical"],
    },
    {
        "name": "Pistol Squat",
        "slug": "pistol-squat",
        "category": "legs",
        "difficulty": "advanced",
        "short_description": "Single-leg squat to full depth.",
        "long_description": "Stand on one leg with the other extended in front. Squat all the way down "
                            "and stand back up without touching the free leg to the floor.",
        "muscles_primary": ["quads", "glutes"],
        "muscles_secondary": ["core", "calves"],
        "equipment": [],
        "progressions": ["Weighted Pistol Squat"],
        "regressions": ["Box Pistol", "Bulgarian Split Squat"],
        "tips": ["Reach the arms forward for balance"],
    },
    # Core
    {
        "name": "Plank",
        "slug": "plank",
        "category": "core",
        "difficulty": "beginner",
        "short_description": "Isometric forearm plank.",
        "long_description": "Support yourself on forearms and toes with a straight body, holding for time.",
        "muscles_primary": ["abs"],
        "muscles_secondary": ["shoulders", "glutes"],
        "equipment": [],
        "progressions": ["Hollow Body Hold"],
        "regressions": ["Knee Plank"],
        "tips": ["Tuck the pelvis under slightly"],
    },
    {
        "name": "Hollow Body Hold",
        "slug": "hollow-body-hold",
        "category": "core",
        "difficulty": "beginner",
        "short_description": "Gymnastics core position held for time.",
        "long_description": "Lie on your back, press the lower back into the floor and lift the "
                            "shoulders and legs, arms extended overhead.",
        "muscles_primary": ["abs"],
        "muscles_secondary": ["hip flexors"],
        "equipment": [],
        "progressions": ["Hollow Body Rock"],
        "regressions": ["Tuck Hollow Hold"],
        "tips": ["Lower back never leaves the floor"],
    },
    {
        "name": "Hanging Knee Raise",
        "slug": "hanging-knee-raise",
        "category": "core",
        "difficulty": "intermediate",
        "short_description": "Knee raise from a dead hang.",
        "long_description": "Hang from a bar and raise the knees towards the chest without swinging.",
        "muscles_primary": ["abs", "hip flexors"],
        "muscles_secondary": ["forearms"],
        "equipment": ["pull-up bar"],
        "progressions": ["Hanging Leg Raise", "Toes to Bar"],
        "regressions": ["Lying Leg Raise"],
        "tips": ["Curl the pelvis up at the top"],
    },
    {
        "name": "L-sit",
        "slug": "l-sit",
        "category": "core",
        "difficulty": "intermediate",
        "short_description": "Straight-leg support hold.",
        "long_description": "Support yourself on parallettes or the floor with locked arms and hold the "
                            "legs straight out in front at hip height.",
        "muscles_primary": ["abs", "hip flexors"],
        "muscles_secondary": ["triceps", "shoulders"],
        "equipment": ["parallettes"],
        "progressions": ["V-sit"],
        "regressions": ["Tuck L-sit"],
        "tips": ["Push the shoulders down away from the ears"],
    },
    # Skill
    {
        "name": "Wall Handstand",
        "slug": "wall-handstand",
        "category": "skill",
        "difficulty": "intermediate",
        "short_description": "Chest-to-wall handstand hold.",
        "long_description": "Walk the feet up a wall until the body is vertical with the chest facing the "
                            "wall, and hold with a hollow body line.",
        "muscles_primary": ["shoulders"],
        "muscles_secondary": ["core", "triceps"],
        "equipment": ["wall"],
        "progressions": ["Freestanding Handstand"],
        "regressions": ["Pike Hold"],
        "tips": ["Push tall through the shoulders"],
    },
]


INITIAL_TEMPLATES = [
    {
        "name": "Push Day Fundamentals",
        "description": "A solid push workout focusing on chest, shoulders, and triceps using bodyweight "
                       "exercises. Perfect for beginners starting their calisthenics journey.",
        "difficulty": "beginner",
        "category": "push",
        "exercises": [
            {"slug": "push-up", "sets": 3, "reps": 12, "rest": 60, "notes": "Focus on full range of motion, chest to floor"},
            {"slug": "diamond-push-up", "sets": 3, "reps": 8, "rest": 90, "notes": "Keep elbows close to body for tricep focus"},
            {"slug": "pike-push-up", "sets": 3, "reps": 10, "rest": 90, "notes": "Great for shoulder development, hips elevated"},
            {"slug": "dip", "sets": 3, "reps": 8, "rest": 90, "notes": "Go to 90 degrees for full activation"},
        ],
    },
    {
        "name": "Pull Day Foundations",
        "description": "Build a strong back and biceps with this foundational pulling workout. "
                       "Master the basics before progressing.",
        "difficulty": "beginner",
        "category": "pull",
        "exercises": [
            {"slug": "chin-up", "sets": 3, "reps": 8, "rest": 90, "notes": "Underhand grip, easier than pull-ups"},
            {"slug": "ring-row", "sets": 3, "reps": 10, "rest": 60, "notes": "Keep body straight, retract scapula"},
            {"slug": "dead-hang", "sets": 3, "reps": 1, "rest": 60, "notes": "Hold 30-45 seconds"},
        ],
    },
    {
        "name": "Legs Day Basics",
        "description": "Develop lower body strength and mobility with fundamental leg exercises. "
                       "No equipment needed.",
        "difficulty": "beginner",
        "category": "legs",
        "exercises": [
            {"slug": "squat", "sets": 4, "reps": 20, "rest": 60, "notes": None},
            {"slug": "lunge", "sets": 3, "reps": 12, "rest": 60, "notes": "Reps per leg"},
            {"slug": "glute-bridge", "sets": 3, "reps": 15, "rest": 45, "notes": None},
        ],
    },
    {
        "name": "Core & Stability",
        "description": "Strengthen your core and improve stability with these essential exercises. "
                       "A strong core is the foundation of all movement.",
        "difficulty": "beginner",
        "category": "core",
        "exercises": [
            {"slug": "plank", "sets": 3, "reps": 1, "rest": 45, "notes": "Hold 45-60 seconds"},
            {"slug": "hollow-body-hold", "sets": 3, "reps": 1, "rest": 45, "notes": "Hold 20-30 seconds"},
            {"slug": "hanging-knee-raise", "sets": 3, "reps": 10, "rest": 60, "notes": None},
        ],
    },
    {
        "name": "Full Body Strength",
        "description": "Complete full body workout hitting all major muscle groups. Great for building "
                       "foundational strength with a balanced approach.",
        "difficulty": "intermediate",
        "category": "full_body",
        "exercises": [
            {"slug": "pull-up", "sets": 4, "reps": 6, "rest": 120, "notes": None},
            {"slug": "dip", "sets": 4, "reps": 10, "rest": 90, "notes": None},
            {"slug": "bulgarian-split-squat", "sets": 3, "reps": 10, "rest": 90, "notes": "Reps per leg"},
            {"slug": "l-sit", "sets": 3, "reps": 1, "rest": 60, "notes": "Hold 10-20 seconds"},
        ],
    },
    {
        "name": "Advanced Push Power",
        "description": "Challenge yourself with advanced pushing movements. Requires solid foundation "
                       "in basic push exercises.",
        "difficulty": "advanced",
        "category": "push",
        "exercises": [
            {"slug": "archer-push-up", "sets": 4, "reps": 6, "rest": 120, "notes": "Reps per side"},
            {"slug": "wall-handstand", "sets": 3, "reps": 1, "rest": 90, "notes": "Hold 30-60 seconds"},
            {"slug": "dip", "sets": 4, "reps": 12, "rest": 90, "notes": None},
        ],
    },
    {
        "name": "Advanced Pull Mastery",
        "description": "Take your pulling strength to the next level with muscle-ups and lever progressions.",
        "difficulty": "advanced",
        "category": "pull",
        "exercises": [
            {"slug": "muscle-up", "sets": 4, "reps": 3, "rest": 180, "notes": None},
            {"slug": "tuck-front-lever", "sets": 4, "reps": 1, "rest": 120, "notes": "Hold 10-15 seconds"},
            {"slug": "pull-up", "sets": 3, "reps": 10, "rest": 120, "notes": None},
        ],
    },
]
