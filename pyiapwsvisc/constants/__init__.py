from .constants import T_REF, RHO_REF, MU_REF, N_T_SERIES, N_RHO_SERIES, H_I, H_IJ
