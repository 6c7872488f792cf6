"""
Assignment of detected hands to screen-relative left/right slots.
"""
from typing import Sequence

from .errors import InvalidInputError
from .landmarks import validate_hand, wrist_x
from .types import Hand, HandRoles

# Fixed mapping for a lone hand. It assumes the tracker ran on the raw,
# unflipped camera frame and the user watches that frame mirrored, as in a
# selfie preview: the hand reported as "Right" has the larger x in the raw
# frame and so shows on the left of the screen. Flipping the frame before
# tracking (display.mirror in the demo) inverts this relative to the screen;
# the mapping itself never changes.
MIRRORED_ROLE = {"Right": "left", "Left": "right"}


class HandRoleAssigner:
    """
    Resolves 0-2 hands of one frame into left/right slots.

    With one hand the reported handedness decides the slot through
    MIRRORED_ROLE. With two hands the labels are ignored and the hand whose
    wrist has the smaller x is "left"; equal x keeps input order.
    """

    def assign(self, hands: Sequence[Hand]) -> HandRoles:
        """
        Assign roles for one frame.

        Args:
            hands: 0, 1 or 2 hands in tracker order

        Returns:
            HandRoles with the filled slots

        Raises:
            InvalidInputError: more than two hands, bad landmarks, or a
                missing/unknown label on a lone hand
        """
        if len(hands) > 2:
            raise InvalidInputError(f"expected at most 2 hands, got {len(hands)}", field="hands")

        if not hands:
            return HandRoles()

        if len(hands) == 1:
            hand = hands[0]
            validate_hand(hand, 0, require_handedness=True)
            if MIRRORED_ROLE[hand.handedness] == "left":
                return HandRoles(left=hand)
            return HandRoles(right=hand)

        first, second = hands
        validate_hand(first, 0)
        validate_hand(second, 1)
        if wrist_x(second.landmarks) < wrist_x(first.landmarks):
            return HandRoles(left=second, right=first)
        return HandRoles(left=first, right=second)
