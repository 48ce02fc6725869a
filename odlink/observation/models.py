"""Observation models of the different observable types

Description:
------------

The observation models carry what the partial derivatives need to know about an observable: its type, the link ends
it is computed for and the light-time corrections of its signal paths. Every model exposes the corrections through
:meth:`ObservationModel.light_time_corrections`, which returns one list of corrections per signal path (an empty list
for models without a light-time calculator).

"""

# Odlink imports
from odlink.lib import enums
from odlink.observation.light_time import LightTimeCalculator
from odlink.observation.link_ends import LinkEnds


class ObservationModel:
    """Base class for observation models

    Args:
        observable_type (String):                Name of observable type.
        link_ends (LinkEnds):                    Link ends the observable is computed for.
        light_time_calculator (LightTimeCalculator): Signal path of the observable, if any.
    """

    def __init__(self, observable_type, link_ends, light_time_calculator=None):
        self.observable_type = enums.to_enum("observable_type", observable_type)
        self.link_ends = link_ends if isinstance(link_ends, LinkEnds) else LinkEnds(link_ends)
        self.light_time_calculator = light_time_calculator

    @property
    def observation_size(self):
        # Import locally to avoid circular imports
        from odlink.observation import observables

        return observables.observation_size(self.observable_type)

    def light_time_corrections(self):
        """Light-time corrections of each signal path of the observable"""
        if self.light_time_calculator is None:
            return []
        return [self.light_time_calculator.corrections]

    def __repr__(self):
        return f"{type(self).__name__}({self.link_ends!r})"


class OneWayLinkObservationModel(ObservationModel):
    """Observation model of a one-way link from transmitter to receiver"""

    observable = None

    def __init__(self, link_ends, light_time_corrections=None):
        link_ends = link_ends if isinstance(link_ends, LinkEnds) else LinkEnds(link_ends)
        light_time_calculator = LightTimeCalculator(
            link_ends["transmitter"], link_ends["receiver"], corrections=light_time_corrections
        )
        super().__init__(self.observable, link_ends, light_time_calculator)


class OneWayRangeObservationModel(OneWayLinkObservationModel):

    observable = enums.ObservableType.one_way_range


class OneWayDopplerObservationModel(OneWayLinkObservationModel):

    observable = enums.ObservableType.one_way_doppler


class AngularPositionObservationModel(OneWayLinkObservationModel):
    """Right ascension and declination of the transmitter as seen from the receiver"""

    observable = enums.ObservableType.angular_position
