"""Bookkeeping for the constraint-validation markers attached to ParabolicCurvesND objects.

The markers (constraintchecked and modified) belong to whichever validator inspects a trajectory. They
are kept here, keyed by the identity of the trajectory object, rather than being part of the trajectory
representation itself. The trajectory classes only ever reset them to zero.

"""
import weakref


class ValidationStatus(object):
    """Plain integer markers owned by an external constraint checker.

    Parameters
    ----------
    constraintchecked : int, optional
    modified : int, optional

    """
    def __init__(self, constraintchecked=0, modified=0):
        self.constraintchecked = constraintchecked
        self.modified = modified


    def Clear(self):
        self.constraintchecked = 0
        self.modified = 0


    def __repr__(self):
        return "ValidationStatus(constraintchecked={0}, modified={1})".format(self.constraintchecked,
                                                                              self.modified)


_statuses = weakref.WeakKeyDictionary()


def GetStatus(obj):
    """Return the ValidationStatus associated with obj, creating a zeroed one on first access.

    """
    status = _statuses.get(obj)
    if status is None:
        status = ValidationStatus()
        _statuses[obj] = status
    return status


def ClearStatus(obj):
    GetStatus(obj).Clear()
