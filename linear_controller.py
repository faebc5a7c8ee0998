import logging

from line_equation import LineModel, Point

logger = logging.getLogger(__name__)

# Right thumb angle (degrees) -> steering angle (degrees)
STEERING_INPUT_RANGE = (-90.0, 90.0)
STEERING_OUTPUT_RANGE = (-45.0, 45.0)

# Absolute left thumb angle (degrees) -> speed (units)
SPEED_INPUT_RANGE = (0.0, 90.0)
SPEED_OUTPUT_RANGE = (0.0, 6.0)

steering_line = LineModel()
speed_line = LineModel()


def _configure(line, input_range, output_range):
    line.configure(Point(input_range[0], output_range[0]),
                   Point(input_range[1], output_range[1]),
                   min(output_range), max(output_range))


def linear_control(right_angle, left_angle_abs):
    """
    The simplest linear control: directly map the input angle to the output value
    Args:
        right_angle (float): The angle of the right thumb, range -90 to 90 degrees
        left_angle_abs (float): The absolute value of the left thumb angle, range 0 to 90 degrees

    Returns:
        tuple: (steering_signed, abs_speed)
    """
    # Out of range angles land on the output limits
    steering_signed = steering_line.evaluate(right_angle)
    abs_speed = speed_line.evaluate(left_angle_abs)

    return round(steering_signed, 2), round(abs_speed, 2)


def reset_linear():
    _configure(steering_line, STEERING_INPUT_RANGE, STEERING_OUTPUT_RANGE)
    _configure(speed_line, SPEED_INPUT_RANGE, SPEED_OUTPUT_RANGE)
    logger.info("Linear controller lines reset")


reset_linear()
