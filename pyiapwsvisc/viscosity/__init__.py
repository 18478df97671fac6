from .viscosity import (
    viscosity, d_viscosity_dT, d_viscosity_dRho, viscosity_and_derivatives,
    WaterViscosityIAPWS, OutOfDomainError, check_state_domain, reduced_state, prop_var,
    mu0_factor, dmu0_factor_dT, bar_mu0, dbar_mu0_dT,
    series_factor_T, series_factor_rho, mu1_factor, dmu1_factor_dT, dmu1_factor_drho,
    bar_mu, dbar_mu_dT, dbar_mu_drho,
)
