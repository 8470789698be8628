import numpy as np
from copy import deepcopy
import bisect
import logging

from .utilities import epsilon, inf, FuzzyEquals, FuzzyZero, GenerateStringFromVector
from .status import GetStatus, ClearStatus

log = logging.getLogger(__name__)


class Ramp(object):
    """A Ramp is a constant-acceleration one-dimensional trajectory. When plotting its velocity
    evolution over time, the graph is a `ramp` on the velocity-time plane, hence the name.

    Parameters (input)
    ------------------
    v0 : float
        Initial velocity of the trajectory.
    a : float
        Acceleration of the trajectory.
    t : float
        Duration of the trajectory. It must be non-negative (up to epsilon).
    x0 : float, optional
        Initial displacement of the trajectory. If not given, x0 will be set to zero.

    Parameters (calculated from inputs)
    -----------------------------------
    v1 : float
        Final velocity of the trajectory.
    d : float
        total displacement made by this Ramp (i.e., independent of x0).
    x1 : float
        Final displacement at the end of the trajectory: x1 = x0 + d.

    """
    def __init__(self, v0, a, t, x0=0):
        self.Initialize(v0, a, t, x0)


    def Initialize(self, v0, a, t, x0=0):
        """Initialize (or reinitialize) the Ramp with the given parameters and calculate the other
        parameters accordingly.

        """
        assert(t >= -epsilon)
        if (t < 0):
            t = 0.0

        self.v0 = v0
        self.a = a
        self.duration = t
        self.x0 = x0
        self._Derive()


    def _Derive(self):
        # v1, d, and x1 are only ever written here
        self.v1 = self.v0 + self.a*self.duration
        self.d = self.duration*(self.v0 + 0.5*self.a*self.duration)
        self.x1 = self.x0 + self.d


    def EvalPos(self, t):
        """Evaluate the position at the given time instant.

        Parameters
        ----------
        t : float
            Time instant at which to evaluate the position.

        Returns
        -------
        x : float
            Position at time t.

        """
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t <= 0):
            return self.x0
        elif (t >= self.duration):
            return self.x1
        else:
            return self.x0 + t*(self.v0 + 0.5*self.a*t)


    def EvalVel(self, t):
        """Evaluate the velocity at the given time instant.

        Parameters
        ----------
        t : float
            Time instant at which to evaluate the velocity.

        Returns
        -------
        v : float
            Velocity at time t.

        """
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t <= 0):
            return self.v0
        elif (t >= self.duration):
            return self.v1
        else:
            return self.v0 + self.a*t


    def EvalAcc(self, t):
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        return self.a


    def GetPeaks(self):
        """Calculate the peaks of positions along the trajectory.

        Returns
        -------
        xmin : float
            Minimum position along the trajectory.
        xmax : float
            Maximum position along the trajectory.

        """
        if self.x0 > self.x1:
            [curMin, curMax] = [self.x1, self.x0]
        else:
            [curMin, curMax] = [self.x0, self.x1]

        if FuzzyZero(self.a, epsilon):
            return [curMin, curMax]

        tDeflection = -self.v0/self.a # the time when velocity crosses zero
        if (tDeflection <= 0) or (tDeflection >= self.duration):
            return [curMin, curMax]

        xDeflection = self.EvalPos(tDeflection)
        curMin = min(curMin, xDeflection)
        curMax = max(curMax, xDeflection)
        return [curMin, curMax]


    def SetInitialValue(self, newX0):
        """Set the initial displacement (position) of the trajectory to the given value and recalculate the
        related parameters accordingly.

        Parameters
        ----------
        newX0 : float
            The new initial displacement.

        """
        self.x0 = newX0
        self._Derive()


    def UpdateDuration(self, newDuration):
        """Set the trajectory duration to the given value and recalculate the related parameters accordingly.

        Parameters
        ----------
        newDuration : float
            The new duration.

        """
        assert(newDuration >= -epsilon)
        if (newDuration < 0):
            newDuration = 0.0

        self.duration = newDuration
        self._Derive()


    def GetInfo(self, name=""):
        lines = ["Ramp information: {0}".format(name),
                 "  v0 = {0:.15e}".format(self.v0),
                 "   a = {0:.15e}".format(self.a),
                 "   t = {0:.15e}".format(self.duration),
                 "  x0 = {0:.15e}".format(self.x0),
                 "  v1 = {0:.15e}".format(self.v1),
                 "   d = {0:.15e}".format(self.d),
                 "  x1 = {0:.15e}".format(self.x1)]
        return "\n".join(lines)


    def PrintInfo(self, name=""):
        print(self.GetInfo(name))


    def __repr__(self):
        return "Ramp(v0={0!r}, a={1!r}, t={2!r}, x0={3!r})".format(self.v0, self.a, self.duration, self.x0)


class ParabolicCurve(object):
    """A ParabolicCurve is a piecewise-constant-acceleration one-dimensional trajectory. It is a
    concatenation of Ramps.

    Parameters (input)
    ------------------
    ramps : list of Ramps, optional
        The list of Ramps to construct the ParabolicCurve with. The Ramps are copied.

    Parameters (generated from inputs)
    ----------------------------------
    x0 : float
        Initial displacement of the trajectory.
    x1 : float
        Final displacement of the trajectory.
    v0 : float
        Initial velocity of the trajectory.
    v1 : float
        Final velocity of the trajectory.
    switchpointsList : list of float
        List of switch points, time instants at which the acceleration changes. It always starts with
        0 and ends with the duration (or is empty if the curve is empty).
    duration : float
        Duration of the trajectory.
    d : float
        Total displacement made by this trajectory.

    """
    def __init__(self, ramps=None):
        self.Reset()
        if ramps is not None and len(ramps) > 0:
            self.Initialize(ramps)


    def __getitem__(self, index):
        return self.ramps[index]


    def __len__(self):
        return len(self.ramps)


    def Initialize(self, ramps):
        """(Re)initialize this ParabolicCurve with the given non-empty list of Ramps. The initial
        displacement of the first Ramp becomes the initial displacement of the curve and every other Ramp
        is rebased so that the position is continuous.

        """
        assert(len(ramps) > 0)

        self.ramps = deepcopy(list(ramps))
        self.switchpointsList = [0.0]
        dur = 0.0
        d = 0.0
        for ramp in self.ramps:
            dur += ramp.duration
            d += ramp.d
            self.switchpointsList.append(dur)
        self.duration = dur
        self.d = d
        self.v0 = self.ramps[0].v0
        self.v1 = self.ramps[-1].v1

        self.SetInitialValue(self.ramps[0].x0)


    def Reset(self):
        self.x0 = 0.0
        self.x1 = 0.0
        self.v0 = 0.0
        self.v1 = 0.0
        self.duration = 0.0
        self.d = 0.0
        self.switchpointsList = []
        self.ramps = []


    def IsEmpty(self):
        return len(self) == 0


    def Append(self, curve):
        """Append a ParabolicCurve to this one. Users need to make sure that the displacement and velocity
        are continuous at the junction; this is not checked.

        Parameters
        ----------
        curve : ParabolicCurve
            ParabolicCurve to be appended. It must not be empty.

        """
        assert(not curve.IsEmpty())

        if self.IsEmpty():
            self.switchpointsList = [0.0]
            self.duration = 0.0
            self.d = 0.0
            self.x0 = curve.x0
            self.v0 = curve.v0

        for ramp in curve.ramps:
            self.ramps.append(deepcopy(ramp))
            self.d += ramp.d
            self.duration += ramp.duration
            self.switchpointsList.append(self.duration)

        self.v1 = curve.v1
        self.SetInitialValue(self.x0)


    def FindRampIndex(self, t):
        """Find the index of the ramp in which the given time instant lies.

        Parameters
        ----------
        t : float
            Time instant.

        Returns
        -------
        i : int
            Ramp index.
        remainder : float
            Time interval between the beginning of the ramp to t.

        """
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t < epsilon):
            i = 0
            remainder = 0.0
        elif (t > self.duration - epsilon):
            i = len(self.ramps) - 1
            remainder = self.ramps[-1].duration
        else:
            # switchpointsList[i + 1] is the first switch point strictly greater than t
            i = bisect.bisect_right(self.switchpointsList, t) - 1
            remainder = t - self.switchpointsList[i]
        return [i, remainder]


    def EvalPos(self, t):
        """Evaluate the position at the given time instant.

        Parameters
        ----------
        t : float
            Time instant at which to evaluate the position.

        Returns
        -------
        x : float
            Position at time t.

        """
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t <= 0):
            return self.x0
        elif (t >= self.duration):
            return self.x1

        i, remainder = self.FindRampIndex(t)
        return self.ramps[i].EvalPos(remainder)


    def EvalVel(self, t):
        """Evaluate the velocity at the given time instant.

        Parameters
        ----------
        t : float
            Time instant at which to evaluate the velocity.

        Returns
        -------
        v : float
            Velocity at time t.

        """
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t <= 0):
            return self.v0
        elif (t >= self.duration):
            return self.v1

        i, remainder = self.FindRampIndex(t)
        return self.ramps[i].EvalVel(remainder)


    def EvalAcc(self, t):
        """Evaluate the acceleration at the given time instant.

        Parameters
        ----------
        t : float
            Time instant at which to evaluate the acceleration.

        Returns
        -------
        a : float
            Acceleration at time t.

        """
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t <= 0):
            return self.ramps[0].a
        elif (t >= self.duration):
            return self.ramps[-1].a

        i, remainder = self.FindRampIndex(t)
        return self.ramps[i].EvalAcc(remainder)


    def GetPeaks(self):
        """Calculate the peaks of positions along the trajectory.

        Returns
        -------
        xmin : float
            Minimum position along the trajectory.
        xmax : float
            Maximum position along the trajectory.

        """
        xmin = inf
        xmax = -inf

        for ramp in self.ramps:
            [bmin, bmax] = ramp.GetPeaks()
            if bmin < xmin:
                xmin = bmin
            if bmax > xmax:
                xmax = bmax

        assert(xmin < inf)
        assert(xmax > -inf)
        return [xmin, xmax]


    def SetInitialValue(self, x0):
        """Set the initial displacement (position) of the trajectory to the given value and rebase every
        ramp so that each ramp starts where the previous one ends.

        Parameters
        ----------
        x0 : float
            The new initial displacement.

        """
        self.x0 = x0
        newX0 = x0
        for ramp in self.ramps:
            ramp.SetInitialValue(newX0)
            newX0 += ramp.d
        self.x1 = self.x0 + self.d


    def GetInfo(self, name=""):
        lines = ["ParabolicCurve information: {0}".format(name),
                 "  This parabolic curve consists of {0} ramps".format(len(self)),
                 "  v0 = {0:.15e}".format(self.v0),
                 "   t = {0:.15e}".format(self.duration),
                 "  x0 = {0:.15e}".format(self.x0),
                 "  x1 = {0:.15e}".format(self.x1),
                 "   d = {0:.15e}".format(self.d),
                 "  Switch points = " + GenerateStringFromVector(self.switchpointsList)]
        return "\n".join(lines)


    def PrintInfo(self, name=""):
        print(self.GetInfo(name))


class ParabolicCurvesND(object):
    """A ParabolicCurvesND is a (parabolic) trajectory of an n-DOF system. A trajectory of each DOF is a
    ParabolicCurve and all of them share the same duration.

    Parameters (input)
    ------------------
    curves : list of ParabolicCurves, optional
        One ParabolicCurve per DOF. Their durations must agree up to epsilon. The curves are copied.

    Parameters (generated from inputs)
    ----------------------------------
    ndof : int
        Number of DOFs.
    duration : float
        Duration of the trajectory.
    x0Vect, x1Vect, v0Vect, v1Vect, dVect : numpy.ndarray
        Initial/final displacements, initial/final velocities, and total displacements of all DOFs.
    switchpointsList : list of float
        Sorted list of all distinct switch points of all DOFs.
    constraintchecked, modified : int
        Markers owned by an external constraint checker. They are stored in rampcurves.status and are
        reset to zero whenever this trajectory is (re)initialized or reset.

    """
    def __init__(self, curves=None):
        self.Reset()
        if curves is not None and len(curves) > 0:
            self.Initialize(curves)


    def Initialize(self, curves):
        assert(len(curves) > 0)

        # Check first if the input is valid
        minDur = curves[0].duration
        maxDur = curves[0].duration
        for curve in curves[1:]:
            minDur = min(curve.duration, minDur)
            maxDur = max(curve.duration, maxDur)
            # the whole spread must stay within epsilon
            assert( FuzzyEquals(maxDur, minDur, epsilon) )
        if maxDur > minDur:
            log.debug("Durations differ by {0}; using the shortest duration {1}".format(maxDur - minDur, minDur))

        self.curves = deepcopy(list(curves))
        self.duration = minDur
        self.ndof = len(self.curves)
        self.x0Vect = np.asarray([curve.x0 for curve in self.curves], dtype=float)
        self.x1Vect = np.asarray([curve.x1 for curve in self.curves], dtype=float)
        self.v0Vect = np.asarray([curve.v0 for curve in self.curves], dtype=float)
        self.v1Vect = np.asarray([curve.v1 for curve in self.curves], dtype=float)
        self.dVect = np.asarray([curve.d for curve in self.curves], dtype=float)
        ClearStatus(self)

        # The first and the last switch points are shared by every DOF so only the interior ones of the
        # other DOFs need to be merged in.
        self.switchpointsList = list(self.curves[0].switchpointsList)
        for curve in self.curves[1:]:
            for sw in curve.switchpointsList[1:-1]:
                index = bisect.bisect_left(self.switchpointsList, sw)
                if index < len(self.switchpointsList) and FuzzyEquals(sw, self.switchpointsList[index], epsilon):
                    continue
                if index > 0 and FuzzyEquals(sw, self.switchpointsList[index - 1], epsilon):
                    continue
                self.switchpointsList.insert(index, sw)
        if len(self.switchpointsList) > 0:
            self.switchpointsList[-1] = self.duration


    def Reset(self):
        self.ndof = 0
        self.duration = 0.0
        self.curves = []
        self.x0Vect = np.zeros(0)
        self.x1Vect = np.zeros(0)
        self.v0Vect = np.zeros(0)
        self.v1Vect = np.zeros(0)
        self.dVect = np.zeros(0)
        self.switchpointsList = []
        ClearStatus(self)


    @property
    def constraintchecked(self):
        return GetStatus(self).constraintchecked


    @constraintchecked.setter
    def constraintchecked(self, value):
        GetStatus(self).constraintchecked = value


    @property
    def modified(self):
        return GetStatus(self).modified


    @modified.setter
    def modified(self, value):
        GetStatus(self).modified = value


    def __getitem__(self, index):
        return self.curves[index]


    def __len__(self):
        return len(self.curves)


    def IsEmpty(self):
        return len(self) == 0


    def Append(self, curvesnd):
        """Append a ParabolicCurvesND to this one. Users need to make sure that the displacement and
        velocity vectors are continuous at the junction; this is not checked.

        The switch points of curvesnd are shifted by the current duration and concatenated to the
        switch points of this trajectory without merging.

        Parameters
        ----------
        curvesnd : ParabolicCurvesND
            Trajectory to be appended. It must not be empty.

        """
        assert(not curvesnd.IsEmpty())

        if self.IsEmpty():
            self.curves = deepcopy(curvesnd.curves)
            self.ndof = curvesnd.ndof
            self.duration = curvesnd.duration
            self.x0Vect = np.array(curvesnd.x0Vect)
            self.x1Vect = np.array(curvesnd.x1Vect)
            self.v0Vect = np.array(curvesnd.v0Vect)
            self.v1Vect = np.array(curvesnd.v1Vect)
            self.dVect = np.array(curvesnd.dVect)
            self.switchpointsList = list(curvesnd.switchpointsList)
            return

        assert(curvesnd.ndof == self.ndof)
        originalDur = self.duration
        self.duration += curvesnd.duration
        for i in range(self.ndof):
            self.curves[i].Append(curvesnd.curves[i])
            self.v1Vect[i] = curvesnd.curves[i].v1
            self.x1Vect[i] = self.curves[i].x1
            self.dVect[i] += curvesnd.curves[i].d

        self.switchpointsList.extend([sw + originalDur for sw in curvesnd.switchpointsList])


    def SetInitialValue(self, x0Vect):
        self.x0Vect = np.array(x0Vect, dtype=float) # make a copy
        for (i, curve) in enumerate(self.curves):
            curve.SetInitialValue(self.x0Vect[i])
        self.x1Vect = self.x0Vect + self.dVect


    def EvalPos(self, t):
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t <= 0):
            return np.array(self.x0Vect)
        elif (t >= self.duration):
            return np.array(self.x1Vect)

        return np.asarray([curve.EvalPos(t) for curve in self.curves])


    def EvalVel(self, t):
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t <= 0):
            return np.array(self.v0Vect)
        elif (t >= self.duration):
            return np.array(self.v1Vect)

        return np.asarray([curve.EvalVel(t) for curve in self.curves])


    def EvalAcc(self, t):
        assert(t >= -epsilon)
        assert(t <= self.duration + epsilon)

        if (t < 0):
            t = 0.0
        elif (t > self.duration):
            t = self.duration

        return np.asarray([curve.EvalAcc(t) for curve in self.curves])


    def GetPeaks(self):
        """Calculate the peaks of positions of every DOF.

        Returns
        -------
        xminVect : numpy.ndarray
            Minimum position of each DOF along the trajectory.
        xmaxVect : numpy.ndarray
            Maximum position of each DOF along the trajectory.

        """
        xminVect = np.zeros(self.ndof)
        xmaxVect = np.zeros(self.ndof)
        for (i, curve) in enumerate(self.curves):
            xminVect[i], xmaxVect[i] = curve.GetPeaks()
        return xminVect, xmaxVect


    def GetInfo(self, name=""):
        lines = ["ParabolicCurvesND information: {0}".format(name),
                 "  This parabolic curve has {0} DOFs".format(self.ndof),
                 "  t = {0:.15e}".format(self.duration),
                 "  x0Vect = " + GenerateStringFromVector(self.x0Vect),
                 "  x1Vect = " + GenerateStringFromVector(self.x1Vect),
                 "  Switch points = " + GenerateStringFromVector(self.switchpointsList)]
        return "\n".join(lines)


    def PrintInfo(self, name=""):
        print(self.GetInfo(name))

