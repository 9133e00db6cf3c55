"""The fixed catalogue of TAS tools.

One entry per tool name. `priority_index` follows the version 3+ execution
order of the engine and must never be renumbered: executors depend on the
absolute ordering. `duration_index` values point into the pre-order slot
list of each grammar (see schema.py).
"""

from __future__ import annotations

from .schema import (
    EASING_TYPES,
    NO_DURATION,
    ToolSchema,
    keyword,
    number,
    ticks,
    word,
)

_EASING = "Specifies which algorithm to use for interpolation. Options are `cubic`, `exp`/`exponential`, `linear` or `sin`/`sine`. If omitted, `linear` is used."


CHECK = ToolSchema(
    name="check",
    fixed_order=True,
    has_off=False,
    registers_active_state=False,
    arguments=(
        keyword("pos", children=(
            number(required=True, key="x"),
            number(required=True, key="y"),
            number(required=True, key="z"),
        )),
        keyword("ang", children=(
            number(required=True, key="pitch"),
            number(required=True, key="yaw"),
        )),
        keyword("posepsilon", children=(number(required=True, key="posepsilon", minimum=0),)),
        keyword("angepsilon", children=(number(required=True, key="angepsilon", minimum=0),)),
    ),
    expects_arguments=True,
    priority_index=0,
    description=(
        "**Syntax:** ```check [pos x y z] [ang pitch yaw] [posepsilon val] [angepsilon val]```\n\n"
        "The check tool accepts a target position and angle, and a precision value "
        "(posepsilon (default: 0.5), angepsilon (default: 0.2)). **Before** the tick it is on, "
        "it will check whether the player position is close to (meaning \"within posepsilon / "
        "angepsilon units\") the target position, and if "
        "not, replay the active script. It will do this a maximum of "
        "```sar_tas_check_max_replays``` (default 15) times.\n\n"
        "**Example:** ```check pos 100 250 312.7```"
    ),
)

CMD = ToolSchema(
    name="cmd",
    fixed_order=False,
    has_off=False,
    registers_active_state=False,
    expects_arguments=True,
    allow_arbitrary_arguments=True,
    priority_index=1,
    description=(
        "**Syntax:** ```cmd <command>```\n\n"
        "Runs the provided console command. Not encased in quotes.\n\n"
        "**Example:** ```cmd say hello world!```"
    ),
)

STOP = ToolSchema(
    name="stop",
    fixed_order=False,
    has_off=False,
    registers_active_state=False,
    expects_arguments=False,
    priority_index=2,
    stops_all_tools=True,
    description=(
        "**Syntax:** ```stop```\n\n"
        "Stops every tool activated prior to given tick.\n\n"
        "**Example:** ```stop```"
    ),
)

USE = ToolSchema(
    name="use",
    fixed_order=True,
    has_off=False,
    registers_active_state=False,
    arguments=(
        keyword("spam", description="Spams ```+use``` every other tick"),
    ),
    expects_arguments=False,
    priority_index=3,
    description=(
        "**Syntax:** ```use [spam]```\n\n"
        "Presses the ```+use``` input. It also has an option for spamming, which will spam "
        "+use every other tick.\n\n"
        "**Example:** ```use spam```"
    ),
)

DUCK = ToolSchema(
    name="duck",
    fixed_order=True,
    has_off=True,
    registers_active_state=True,
    duration_index=1,
    arguments=(
        keyword("on", description="Enables ```duck```.", otherwise=(
            ticks(description="Duck duration, in ticks"),
        )),
    ),
    expects_arguments=False,
    priority_index=4,
    description=(
        "**Syntax:** ```duck [duration]```\n\n"
        "Presses the duck input. Can take a number parameter for a duration.\n\n"
        "**Example:** ```duck 20```"
    ),
)

ZOOM = ToolSchema(
    name="zoom",
    fixed_order=True,
    has_off=False,
    registers_active_state=False,
    arguments=(
        keyword("in", description="Zooms in"),
        keyword("out", description="Zooms out"),
        keyword("toggle", description="Toggles zoom"),
    ),
    expects_arguments=True,
    priority_index=5,
    description=(
        "**Syntax:** ```zoom [action]```\n\n"
        "Used for zooming in and out. Also detects whether to press an input based on "
        "whether you're zooming or not.\n\n"
        "**Example:** ```zoom in```"
    ),
)

SHOOT = ToolSchema(
    name="shoot",
    fixed_order=False,
    has_off=True,
    registers_active_state=False,
    arguments=(
        keyword("blue", group="portal", description="Shoots the blue portal"),
        keyword("orange", group="portal", description="Shoots the orange portal"),
        keyword("spam", description="Automates spamming, automatically detecting the portal gun's cooldown"),
    ),
    expects_arguments=True,
    priority_index=6,
    description=(
        "**Syntax:** ```shoot [portal]```\n\n"
        "Used to shoot portals. Can automate spamming with the ```spam``` property, which "
        "will automatically detect the portal gun's cooldown.\n\n"
        "**Example:** ```shoot blue```"
    ),
)

SETANG = ToolSchema(
    name="setang",
    fixed_order=True,
    has_off=False,
    registers_active_state=True,
    duration_index=2,
    arguments=(
        number(required=True, key="pitch"),
        number(required=True, key="yaw"),
        ticks(description="Time to reach the angles, in ticks"),
        word(key="easing", choices=EASING_TYPES, description="Easing type for the setang among: `cubic`, `exp`/`exponential`, `linear` or `sin`/`sine`"),
    ),
    expects_arguments=True,
    priority_index=7,
    description=(
        "**Syntax:** ```setang <pitch> <yaw> [time] [easing]```\n\n"
        "This tool works basically the same as setang console command. It will adjust the "
        "view analog in a way so the camera is looking towards given angles.\n\n"
        "**Example:** ```setang 0 0 20```"
    ),
)

AUTOAIM = ToolSchema(
    name="autoaim",
    fixed_order=True,
    has_off=True,
    registers_active_state=True,
    duration_index=6,
    arguments=(
        keyword(
            "ent",
            children=(
                word(key="entity", otherwise=(
                    number(required=True, key="entity_index", integer=True, minimum=0),
                )),
            ),
            otherwise=(
                number(required=True, key="x"),
                number(required=True, key="y"),
                number(required=True, key="z"),
            ),
        ),
        ticks(description="Time to reach the target, in ticks"),
        word(key="easing", choices=EASING_TYPES, description=_EASING),
    ),
    expects_arguments=True,
    priority_index=8,
    description=(
        "**Syntax:** ```autoaim [ent] <x> <y> <z> [time] [easing]```\n\n"
        "The Auto Aim tool will automatically aim towards a specified point in 3D space.\n\n"
        "**Example:** ```autoaim 0 0 0 20```"
    ),
)

LOOK = ToolSchema(
    name="look",
    fixed_order=True,
    has_off=True,
    registers_active_state=True,
    duration_index=5,
    arguments=(
        keyword("stop", otherwise=(
            number(
                unit="deg",
                key="pitch",
                children=(number(required=True, unit="deg", key="yaw"),),
                otherwise=(
                    word(required=True, key="direction"),
                    word(key="direction2"),
                ),
            ),
        )),
        ticks(description="Look duration, in ticks"),
    ),
    expects_arguments=True,
    priority_index=9,
    description=(
        "**Syntax:** ```look <pitch> <yaw> [time]```\n\n"
        "Can be used to control the view analog. It also accepts additional parameters, "
        "like word-based directions or time.\n\n"
        "**Example:** ```look 10deg 173deg 10```"
    ),
)

AUTOJUMP = ToolSchema(
    name="autojump",
    fixed_order=True,
    has_off=True,
    registers_active_state=True,
    duration_index=NO_DURATION,
    arguments=(
        keyword("on", description="Enables ```autojump```."),
        keyword("duck", description="Enables ```autojump``` while also ducking. Ducking slightly increases your jump height."),
        keyword("ducked", description="Enables ```autojump``` while also ducking. Ducking slightly increases your jump height."),
    ),
    expects_arguments=True,
    priority_index=10,
    description=(
        "**Syntax:** ```autojump [on|duck|ducked]```\n\n"
        "Anything other than ```on```, ```duck``` or ```ducked``` will disable the tool.\n\n"
        "Autojump tool will change the jump button state depending on whether the player is "
        "grounded or not, resulting in automatically jumping on the earliest contact with "
        "a ground.\n\n"
        "**Example:** ```autojump on```"
    ),
)

ABSMOV = ToolSchema(
    name="absmov",
    fixed_order=True,
    has_off=True,
    registers_active_state=True,
    arguments=(
        number(unit="deg?", key="angle"),
        number(key="strength", minimum=0, maximum=1),
    ),
    expects_arguments=True,
    priority_index=11,
    description=(
        "**Syntax:** ```absmov <angle> [strength]```\n\n"
        "Absolute movement tool will generate movement values depending on the absolute "
        "move direction you provide in degrees. Giving off as an argument will disable the "
        "tool. The strength parameter must be between 0 and 1 (default) and controls how "
        "fast the player will move.\n\n"
        "**Example:** ```absmov 90 0.5```"
    ),
)

MOVE = ToolSchema(
    name="move",
    fixed_order=True,
    has_off=True,
    registers_active_state=True,
    arguments=(
        keyword("stop", otherwise=(
            number(unit="deg", key="angle", otherwise=(
                word(required=True, key="direction"),
                word(key="direction2"),
            )),
            number(key="scale", description="Scale factor"),
        )),
    ),
    expects_arguments=True,
    priority_index=12,
    description=(
        "**Syntax:** ```move <direction> [scale]```\n\n"
        "Controls the movement analog. Can accept 1-2 direction parameters, as well as "
        "word-based parameters.\n\n"
        "**Example:** ```move forward left```"
    ),
)

STRAFE = ToolSchema(
    name="strafe",
    fixed_order=False,
    has_off=True,
    registers_active_state=True,
    arguments=(
        keyword("vec", group="type", description="Enables vectorial strafing (movement analog is adjusted to get desired movement direction). (default)"),
        keyword("ang", group="type", description="Enables angular strafing (view analog is adjusted to get desired movement direction). This isn't particularly recommended as it doesn't look appealing, however it is the only effective strafing type while on velocity gel."),
        keyword("veccam", group="type", description="Enables special vectorial strafing that rotates you towards your current moving direction."),
        keyword("max", group="speed", description="Makes autostrafer aim for the greatest acceleration. (default)"),
        keyword("keep", group="speed", description="Makes autostrafer maintain the current velocity."),
        keyword("forward", group="direction", description="Autostrafer will try to strafe in a straight line, towards the current view angle. (default)"),
        keyword("forwardvel", group="direction", description="Autostrafer will try to strafe in a straight line, towards the current velocity angle."),
        keyword("left", group="direction", description="Autostrafer will try to strafe left."),
        keyword("right", group="direction", description="Autostrafer will try to strafe right."),
        keyword("nopitchlock", description="Make the autostrafer not clamp the pitch. The autostrafer will always clamp your pitch angle (up and down) between -30 and 30 when midair, as it gives the fastest possible acceleration (forward movement is being scaled by a cosine of that angle while being airborne). This argument will tell the autostrafer that you wish to enable sub-optimal strafing (this is useful when you need to hit a shot while strafing for example)."),
        keyword("letspeedlock", description="Let the autostrafer speedlock. This option only exists from version 4 onwards and mimics old behavior."),
        number(unit="ups", key="speed", minimum=0, group="speed"),
        number(unit="deg", key="angle", group="direction"),
    ),
    expects_arguments=True,
    priority_index=13,
    description=(
        "**Syntax:** ```strafe [parameters]```\n\n"
        "The strafe tool will adjust player input to get a different kind of strafing "
        "depending on parameters.\n\n"
        "**Example:** ```strafe 299.999ups left veccam```"
    ),
)

DECEL = ToolSchema(
    name="decel",
    fixed_order=True,
    has_off=True,
    registers_active_state=True,
    arguments=(
        number(unit="ups?", key="speed", minimum=0),
    ),
    expects_arguments=True,
    priority_index=14,
    description=(
        "**Syntax:** ```decel <speed>```\n\n"
        "The decelaration tool will slow down as quickly as possible to the given speed.\n\n"
        "**Example:** ```decel 100```"
    ),
)


CATALOGUE: tuple[ToolSchema, ...] = (
    CHECK,
    CMD,
    STOP,
    USE,
    DUCK,
    ZOOM,
    SHOOT,
    SETANG,
    AUTOAIM,
    LOOK,
    AUTOJUMP,
    ABSMOV,
    MOVE,
    STRAFE,
    DECEL,
)
