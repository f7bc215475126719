""" Multisig wallet deployment. """

from .cardano import NativeScriptDeployer, NativeScriptWallet
from .pipeline import Deployer, DeploymentResult, WalletDeployment, deploy_wallet
