"""The casino: arms, regret accounting and the simulation loop."""
